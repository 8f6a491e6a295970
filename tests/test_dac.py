import pytest

from glidemesh.dac import (
    DacDescription,
    DacOperation,
    DacRdWr,
    DacSetMemClk,
    DacSetVideo,
    DacSetVideoMode,
    EnvironmentTable,
)


def _dac():
    write = DacRdWr(DacOperation.WRITE, 1, 2, 3)
    return DacDescription(
        manufacturer="ACME",
        device="Model A",
        detect=[DacRdWr(DacOperation.READ_CHECK, 2, 0x84, 0xFF)],
        set_video=[
            DacSetVideo(640, 480, 60, True, [write]),
            DacSetVideo(640, 480, 60, False, [write, write]),
            DacSetVideo(800, 600, 60, True, []),
        ],
        set_mem_clock=[DacSetMemClk(50, [write]), DacSetMemClk(75, [])],
        set_video_mode=[DacSetVideoMode(True, [write]), DacSetVideoMode(False, [])],
    )


def test_operation_values_follow_ini_numbering():
    assert [op.value for op in DacOperation] == [0, 1, 2, 3, 4, 5]
    assert DacOperation(4) is DacOperation.READ_PUSH


def test_rdwr_converts_plain_operation_number():
    access = DacRdWr(5, 0x10, 0xFFFFFFFF, 0)
    assert access.operation is DacOperation.WRITE_MODIFY_POP
    assert access.data == 0xFFFFFFFF


@pytest.mark.parametrize("address", [-1, 256])
def test_rdwr_rejects_bad_address(address):
    with pytest.raises(ValueError):
        DacRdWr(DacOperation.WRITE, address)


def test_rdwr_rejects_wide_data_and_unknown_operation():
    with pytest.raises(ValueError):
        DacRdWr(DacOperation.WRITE, 0, 1 << 32)
    with pytest.raises(ValueError):
        DacRdWr(DacOperation.WRITE, 0, 0, -1)
    with pytest.raises(ValueError):
        DacRdWr(9, 0)


def test_find_video_distinguishes_depth():
    dac = _dac()
    assert dac.find_video(640, 480, 60, True) is dac.set_video[0]
    assert dac.find_video(640, 480, 60, False) is dac.set_video[1]
    assert len(dac.find_video(640, 480, 60, False).operations) == 2


def test_find_video_missing_mode():
    assert _dac().find_video(1024, 768, 60, True) is None
    assert _dac().find_video(800, 600, 60, False) is None


def test_find_mem_clock():
    dac = _dac()
    assert dac.find_mem_clock(75) is dac.set_mem_clock[1]
    assert dac.find_mem_clock(90) is None


def test_find_video_mode():
    dac = _dac()
    assert dac.find_video_mode(True) is dac.set_video_mode[0]
    assert dac.find_video_mode(False) is dac.set_video_mode[1]
    assert DacDescription("x", "y").find_video_mode(True) is None


def test_description_name_length_limit():
    DacDescription("m" * 99, "d")
    with pytest.raises(ValueError):
        DacDescription("m" * 100, "d")
    with pytest.raises(ValueError):
        DacDescription("m", "d" * 100)


def test_environment_set_and_get():
    table = EnvironmentTable()
    table.set("SSTV2_GAMMA", "1.3")
    assert table.get("SSTV2_GAMMA") == "1.3"
    assert table.get("SSTV2_OTHER") is None
    assert "SSTV2_GAMMA" in table


def test_environment_replaces_value():
    table = EnvironmentTable()
    table.set("NAME", "first")
    table.set("NAME", "second")
    assert table.get("NAME") == "second"
    assert len(table) == 1
    assert list(table) == ["NAME"]


def test_environment_limits():
    table = EnvironmentTable()
    with pytest.raises(ValueError):
        table.set("", "value")
    with pytest.raises(ValueError):
        table.set("n" * 100, "value")
    with pytest.raises(ValueError):
        table.set("NAME", "v" * 256)
    table.set("n" * 99, "v" * 255)
    assert table.get("n" * 99) == "v" * 255