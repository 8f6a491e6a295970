import pytest

from glidemesh import registers as r


@pytest.mark.parametrize("n", range(32))
def test_bit_sets_exactly_one_bit(n):
    value = r.bit(n)
    assert value.bit_length() == n + 1
    assert bin(value).count("1") == 1


@pytest.mark.parametrize("n", [-1, 32, 40])
def test_bit_rejects_out_of_range(n):
    with pytest.raises(ValueError):
        r.bit(n)


def test_bit_matches_header_constant():
    assert r.bit(21) == r.SST_CMDFIFO_ADDR
    assert r.bit(1) == r.SST_PCIMEM_ACCESS_EN


@pytest.mark.parametrize(
    "width, shift, expected",
    [
        (4, r.SST_CHUCK_REVISION_ID_SHIFT, r.SST_CHUCK_REVISION_ID),
        (8, r.SST_SLI_SNOOP_MEMBASE_SHIFT, r.SST_SLI_SNOOP_MEMBASE),
        (5, r.SST_TF_FIFO_THRESH_SHIFT, r.SST_TF_FIFO_THRESH),
        (10, r.SST_MEM_FIFO_ROW_ROLL_SHIFT, r.SST_MEM_FIFO_ROW_ROLL),
        (7, r.SST_CMDFIFO_PCI_TIMEOUT_SHIFT, r.SST_CMDFIFO_PCI_TIMEOUT),
    ],
)
def test_field_mask_matches_header_masks(width, shift, expected):
    assert r.field_mask(width, shift) == expected


@pytest.mark.parametrize("width, shift", [(0, 0), (-1, 3), (4, -1), (8, 25), (33, 0)])
def test_field_mask_rejects_bad_geometry(width, shift):
    with pytest.raises(ValueError):
        r.field_mask(width, shift)


def test_field_mask_full_register():
    assert r.field_mask(32, 0) == r.REGISTER_MASK


def test_extract_field_reads_default_value():
    shift = r.SST_TEX_MEM_REFRESH_SHIFT
    assert r.extract_field(r.SST_TREXINIT0_DEFAULT, r.SST_TEX_MEM_REFRESH, shift) == 0x020


def test_extract_field_reads_trexinit1_default():
    value = r.SST_TREXINIT1_DEFAULT
    assert r.extract_field(value, r.SST_TEX_FT_FIFO_SIL, r.SST_TEX_FT_FIFO_SIL_SHIFT) == 0x8
    assert r.extract_field(value, r.SST_TEX_TT_FIFO_SIL, r.SST_TEX_TT_FIFO_SIL_SHIFT) == 0x8
    assert r.extract_field(value, r.SST_TEX_TF_CLK_DEL_ADJ, r.SST_TEX_TF_CLK_DEL_ADJ_SHIFT) == 0xF


@pytest.mark.parametrize("field", [0, 1, 0x15, 0x3F])
def test_insert_then_extract_round_trip(field):
    base = r.SST_FBIINIT4_DEFAULT
    updated = r.insert_field(base, field, r.SST_MEM_FIFO_LWM, r.SST_MEM_FIFO_LWM_SHIFT)
    assert r.extract_field(updated, r.SST_MEM_FIFO_LWM, r.SST_MEM_FIFO_LWM_SHIFT) == field
    assert updated & ~r.SST_MEM_FIFO_LWM == base & ~r.SST_MEM_FIFO_LWM


def test_insert_field_replaces_existing_bits():
    value = r.SST_SWAP_SLISYNC
    updated = r.insert_field(value, 1, r.SST_SWAP_ALGORITHM, r.SST_SWAP_ALGORITHM_SHIFT)
    assert updated == r.SST_SWAP_DACDATA0


def test_insert_field_in_top_bits_stays_unsigned():
    updated = r.insert_field(0, 0xFF, r.SST_SLI_SNOOP_MEMBASE, r.SST_SLI_SNOOP_MEMBASE_SHIFT)
    assert updated == r.SST_SLI_SNOOP_MEMBASE
    assert 0 <= updated <= r.REGISTER_MASK


def test_insert_field_rejects_too_wide_value():
    with pytest.raises(ValueError):
        r.insert_field(0, 0x40, r.SST_MEM_FIFO_LWM, r.SST_MEM_FIFO_LWM_SHIFT)


def test_insert_field_rejects_negative_value():
    with pytest.raises(ValueError):
        r.insert_field(0, -1, r.SST_MEM_FIFO_LWM, r.SST_MEM_FIFO_LWM_SHIFT)


@pytest.mark.parametrize("value", [-1, 1 << 32])
def test_extract_field_rejects_non_register_value(value):
    with pytest.raises(ValueError):
        r.extract_field(value, 0xFF, 0)


def test_clut_entry_packs_bytes_in_order():
    assert r.clut_entry(0xAB, 0x12, 0x34, 0x56) == 0xAB123456


@pytest.mark.parametrize(
    "entry", [(0, 0, 0, 0), (255, 255, 255, 255), (31, 128, 7, 200), (1, 2, 3, 4)]
)
def test_clut_round_trip(entry):
    assert r.decode_clut_entry(r.clut_entry(*entry)) == entry


@pytest.mark.parametrize(
    "entry", [(256, 0, 0, 0), (0, -1, 0, 0), (0, 0, 300, 0), (0, 0, 0, 256)]
)
def test_clut_entry_rejects_out_of_range(entry):
    with pytest.raises(ValueError):
        r.clut_entry(*entry)


def test_decode_clut_entry_rejects_wide_value():
    with pytest.raises(ValueError):
        r.decode_clut_entry(1 << 32)


def test_decode_clut_entry_field_values():
    assert r.decode_clut_entry(0x01020304) == (1, 2, 3, 4)