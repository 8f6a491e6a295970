"""Bit fields of the SST-1 / Voodoo2 initialisation registers."""

from __future__ import annotations

REGISTER_BITS = 32
REGISTER_MASK = (1 << REGISTER_BITS) - 1


def bit(n: int) -> int:
    """Return a 32-bit register value with only bit ``n`` set."""
    if not 0 <= n < REGISTER_BITS:
        raise ValueError(f"bit number {n} outside 0..{REGISTER_BITS - 1}")
    return 1 << n


def field_mask(width: int, shift: int) -> int:
    """Return the mask of a ``width``-bit field starting at bit ``shift``."""
    if width < 1:
        raise ValueError(f"field width must be positive, got {width}")
    if shift < 0:
        raise ValueError(f"field shift must not be negative, got {shift}")
    if width + shift > REGISTER_BITS:
        raise ValueError(f"field of {width} bits at {shift} does not fit in a register")
    return ((1 << width) - 1) << shift


def _check_register(value: int) -> None:
    if not 0 <= value <= REGISTER_MASK:
        raise ValueError(f"register value {value:#x} is not a 32-bit unsigned value")


def extract_field(value: int, mask: int, shift: int) -> int:
    """Read the field selected by ``mask`` from a register value."""
    _check_register(value)
    return (value & mask) >> shift


def insert_field(value: int, field: int, mask: int, shift: int) -> int:
    """Return ``value`` with the masked field replaced by ``field``."""
    _check_register(value)
    if field < 0:
        raise ValueError(f"field value must not be negative, got {field}")
    shifted = field << shift
    if shifted & ~mask:
        raise ValueError(f"field value {field:#x} does not fit in mask {mask:#x}")
    return (value & ~mask & REGISTER_MASK) | shifted


# PCI configuration
SST_CMDFIFO_ADDR = bit(21)
SST_PCIMEM_ACCESS_EN = bit(1)
SST_PCI_INIT_ENABLE_DEFAULT = 0x0
SST_PCI_BUS_SNOOP_DEFAULT = 0x0

# PCI init enable
SST_SLI_MASTER_OWNPCI = 0x0
SST_CHUCK_REVISION_ID_SHIFT = 12
SST_CHUCK_REVISION_ID = 0xF << SST_CHUCK_REVISION_ID_SHIFT
SST_CHUCK_MFTG_ID_SHIFT = 16
SST_CHUCK_MFTG_ID = 0xF << SST_CHUCK_MFTG_ID_SHIFT
SST_PCI_INTR_EN = bit(20)
SST_PCI_INTR_TIMEOUT_EN = bit(21)
SST_SLI_SNOOP_EN = bit(23)
SST_SLI_SNOOP_MEMBASE_SHIFT = 24
SST_SLI_SNOOP_MEMBASE = 0xFF << SST_SLI_SNOOP_MEMBASE_SHIFT

# Silicon process monitor
SST_SIPROCESS_OSC_CNTR = 0xFFFF
SST_SIPROCESS_PCI_CNTR_SHIFT = 16
SST_SIPROCESS_PCI_CNTR = 0xFFF << SST_SIPROCESS_PCI_CNTR_SHIFT
SST_SIPROCESS_OSC_CNTR_RESET_N = 0
SST_SIPROCESS_OSC_CNTR_RUN = bit(28)
SST_SIPROCESS_OSC_NAND_SEL = 0
SST_SIPROCESS_OSC_NOR_SEL = bit(29)
SST_SIPROCESS_OSC_FORCE_ENABLE = bit(30)

# fbiinit0
SST_GRX_RESET = bit(1)
SST_PCI_FIFO_RESET = bit(2)
SST_EN_ENDIAN_SWAPPING = bit(3)

# fbiinit1
SST_FBIINIT1_DEFAULT = 0x00201102
SST_VIDEO_TILES_MASK = 0x010000F0
SST_VIDEO_TILES_IN_X_MSB_SHIFT = 24
SST_VIDEO_TILES_IN_X_MSB = 1 << SST_VIDEO_TILES_IN_X_MSB_SHIFT

# fbiinit2
SST_FBIINIT2_DEFAULT = 0x80000040
SST_SWAP_ALGORITHM_SHIFT = 9
SST_SWAP_ALGORITHM = 0x3 << SST_SWAP_ALGORITHM_SHIFT
SST_SWAP_VSYNC = 0 << SST_SWAP_ALGORITHM_SHIFT
SST_SWAP_DACDATA0 = 1 << SST_SWAP_ALGORITHM_SHIFT
SST_SWAP_FIFOSTALL = 2 << SST_SWAP_ALGORITHM_SHIFT
SST_SWAP_SLISYNC = 3 << SST_SWAP_ALGORITHM_SHIFT

# fbiinit3
SST_TEXMAP_DISABLE = bit(6)
SST_FBI_MEM_TYPE_SHIFT = 8
SST_FBI_MEM_TYPE = 0x7 << SST_FBI_MEM_TYPE_SHIFT
SST_FBI_VGA_PASS_POWERON = bit(12)
SST_FT_CLK_DEL_ADJ_SHIFT = 13
SST_FT_CLK_DEL_ADJ = 0xF << SST_FT_CLK_DEL_ADJ_SHIFT
SST_TF_FIFO_THRESH_SHIFT = 17
SST_TF_FIFO_THRESH = 0x1F << SST_TF_FIFO_THRESH_SHIFT
SST_FBIINIT3_DEFAULT = 0x001E4000 | SST_TEXMAP_DISABLE

# fbiinit4
SST_FBIINIT4_DEFAULT = 0x00000001
SST_PCI_RDWS_1 = 0x0
SST_PCI_RDWS_2 = bit(0)
SST_EN_LFB_RDAHEAD = bit(1)
SST_MEM_FIFO_LWM_SHIFT = 2
SST_MEM_FIFO_LWM = 0x3F << SST_MEM_FIFO_LWM_SHIFT
SST_MEM_FIFO_ROW_BASE_SHIFT = 8
SST_MEM_FIFO_ROW_BASE = 0x3FF << SST_MEM_FIFO_ROW_BASE_SHIFT
SST_MEM_FIFO_ROW_ROLL_SHIFT = 18
SST_MEM_FIFO_ROW_ROLL = 0x3FF << SST_MEM_FIFO_ROW_ROLL_SHIFT

# fbiinit5
SST_DAC_24BPP_PORT = bit(2)
SST_GPIO_0 = bit(3)
SST_GPIO_0_DRIVE0 = 0x0
SST_GPIO_0_DRIVE1 = bit(3)
SST_GPIO_0_SHIFT = 3
SST_GPIO_1 = bit(4)
SST_GPIO_1_DRIVE0 = 0x0
SST_GPIO_1_DRIVE1 = bit(4)
SST_GPIO_1_SHIFT = 4
SST_BUFFER_ALLOC_SHIFT = 9
SST_BUFFER_ALLOC = 0x3 << SST_BUFFER_ALLOC_SHIFT
SST_BUFFER_ALLOC_2C0Z = 0x0 << SST_BUFFER_ALLOC_SHIFT
SST_BUFFER_ALLOC_2C1Z = 0x0 << SST_BUFFER_ALLOC_SHIFT
SST_BUFFER_ALLOC_3C0Z = 0x1 << SST_BUFFER_ALLOC_SHIFT
SST_BUFFER_ALLOC_3C1Z = 0x2 << SST_BUFFER_ALLOC_SHIFT
SST_VIDEO_CLK_SLAVE_OE_EN = bit(11)
SST_VID_CLK_2X_OUT_OE_EN = bit(12)
SST_VID_CLK_DAC_DATA16_SEL = bit(13)
SST_SLI_DETECT = bit(14)
SST_HVRETRACE_SYNC_READS = bit(15)
SST_COLOR_BORDER_RIGHT_EN = bit(16)
SST_COLOR_BORDER_LEFT_EN = bit(17)
SST_COLOR_BORDER_BOTTOM_EN = bit(18)
SST_COLOR_BORDER_TOP_EN = bit(19)
SST_SCAN_DOUBLE_HORIZ = bit(20)
SST_SCAN_DOUBLE_VERT = bit(21)
SST_GAMMA_CORRECT_16BPP_EN = bit(22)
SST_INVERT_HSYNC = bit(23)
SST_INVERT_VSYNC = bit(24)
SST_VIDEO_OUT_24BPP_EN = bit(25)
SST_GPIO_1_SEL = bit(27)
SST_FBIINIT5_DEFAULT = SST_HVRETRACE_SYNC_READS | SST_GAMMA_CORRECT_16BPP_EN | SST_GPIO_1_SEL

# fbiinit6
SST_SLI_SWAP_VACTIVE_SHIFT = 0
SST_SLI_SWAP_VACTIVE = 0x7 << SST_SLI_SWAP_VACTIVE_SHIFT
SST_SLI_SWAP_VACTIVE_DRAG_SHIFT = 3
SST_SLI_SWAP_VACTIVE_DRAG = 0x1F << SST_SLI_SWAP_VACTIVE_DRAG_SHIFT
SST_SLI_SYNC_MASTER = bit(8)
SST_GPIO_2 = 0x3 << 9
SST_GPIO_2_DRIVE0 = 0x2 << 9
SST_GPIO_2_DRIVE1 = 0x3 << 9
SST_GPIO_2_FLOAT = 0x1 << 9
SST_GPIO_2_SHIFT = 9
SST_GPIO_3 = 0x3 << 11
SST_GPIO_3_DRIVE0 = 0x2 << 11
SST_GPIO_3_DRIVE1 = 0x3 << 11
SST_GPIO_3_FLOAT = 0x1 << 11
SST_GPIO_3_SHIFT = 11
SST_SLI_SYNCIN = 0x3 << 13
SST_SLI_SYNCIN_DRIVE0 = 0x2 << 13
SST_SLI_SYNCIN_DRIVE1 = 0x3 << 13
SST_SLI_SYNCIN_FLOAT = 0x1 << 13
SST_SLI_SYNCOUT = 0x3 << 15
SST_SLI_SYNCOUT_DRIVE0 = 0x2 << 15
SST_SLI_SYNCOUT_DRIVE1 = 0x3 << 15
SST_SLI_SYNCOUT_FLOAT = 0x1 << 15
SST_DAC_RD = 0x3 << 17
SST_DAC_RD_DRIVE0 = 0x2 << 17
SST_DAC_RD_DRIVE1 = 0x3 << 17
SST_DAC_RD_FLOAT = 0x1 << 17
SST_DAC_WR = 0x3 << 19
SST_DAC_WR_DRIVE0 = 0x2 << 19
SST_DAC_WR_DRIVE1 = 0x3 << 19
SST_DAC_WR_FLOAT = 0x1 << 19
SST_PCI_FIFO_LWM_RDY_SHIFT = 21
SST_PCI_FIFO_LWM_RDY = 0x7F << SST_PCI_FIFO_LWM_RDY_SHIFT
SST_VGA_PASS_N = 0x3 << 28
SST_VGA_PASS_N_DRIVE0 = 0x2 << 28
SST_VGA_PASS_N_DRIVE1 = 0x3 << 28
SST_VIDEO_TILES_IN_X_LSB_SHIFT = 30
SST_VIDEO_TILES_IN_X_LSB = 1 << SST_VIDEO_TILES_IN_X_LSB_SHIFT
SST_FBIINIT6_DEFAULT = 0x0

# fbiinit7
SST_CMDFIFO_EN = bit(8)
SST_CMDFIFO_STORE_OFFSCREEN = bit(9)
SST_CMDFIFO_DISABLE_HOLES = bit(10)
SST_CMDFIFO_RDFETCH_THRESH_SHIFT = 11
SST_CMDFIFO_RDFETCH_THRESH = 0x1F << SST_CMDFIFO_RDFETCH_THRESH_SHIFT
SST_CMDFIFO_SYNC_WRITES = bit(16)
SST_CMDFIFO_SYNC_READS = bit(17)
SST_PCI_PACKER_RESET = bit(18)
SST_TMU_CHROMA_REG_WR_EN = bit(19)
SST_CMDFIFO_PCI_TIMEOUT_SHIFT = 20
SST_CMDFIFO_PCI_TIMEOUT = 0x7F << SST_CMDFIFO_PCI_TIMEOUT_SHIFT
SST_TEXMEMWR_BURST_EN = bit(27)
SST_FBIINIT7_DEFAULT = SST_TEXMEMWR_BURST_EN | SST_TMU_CHROMA_REG_WR_EN

# trexInit0
SST_EN_TEX_MEM_REFRESH = bit(0)
SST_TEX_MEM_REFRESH_SHIFT = 1
SST_TEX_MEM_REFRESH = 0x1FF << SST_TEX_MEM_REFRESH_SHIFT
SST_TEX_MEM_PAGE_SIZE_SHIFT = 10
SST_TEX_MEM_PAGE_SIZE_8BITS = 0x0 << SST_TEX_MEM_PAGE_SIZE_SHIFT
SST_TEX_MEM_PAGE_SIZE_9BITS = 0x1 << SST_TEX_MEM_PAGE_SIZE_SHIFT
SST_TEX_MEM_PAGE_SIZE_10BITS = 0x2 << SST_TEX_MEM_PAGE_SIZE_SHIFT
SST_TEX_MEM_SECOND_RAS_BIT_SHIFT = 12
SST_TEX_MEM_SECOND_RAS_BIT_BIT17 = 0x0 << SST_TEX_MEM_SECOND_RAS_BIT_SHIFT
SST_TEX_MEM_SECOND_RAS_BIT_BIT18 = 0x1 << SST_TEX_MEM_SECOND_RAS_BIT_SHIFT
SST_EN_TEX_MEM_SECOND_RAS = bit(14)
SST_TEX_MEM_TYPE_SHIFT = 15
SST_TEX_MEM_TYPE_EDO = 0x0 << SST_TEX_MEM_TYPE_SHIFT
SST_TEX_MEM_TYPE_SYNC = 0x1 << SST_TEX_MEM_TYPE_SHIFT
SST_TEX_MEM_DATA_SIZE_16BIT = 0x0
SST_TEX_MEM_DATA_SIZE_8BIT = bit(18)
SST_TEX_MEM_DO_EXTRA_CAS = bit(19)
SST_TEX_MEM2 = bit(20)
SST_TREXINIT0_DEFAULT = (
    SST_EN_TEX_MEM_REFRESH
    | (0x020 << SST_TEX_MEM_REFRESH_SHIFT)
    | SST_TEX_MEM_PAGE_SIZE_9BITS
    | SST_TEX_MEM_SECOND_RAS_BIT_BIT18
    | SST_EN_TEX_MEM_SECOND_RAS
    | SST_TEX_MEM_TYPE_EDO
    | SST_TEX_MEM_DATA_SIZE_16BIT
)
SST_TREX0INIT0_DEFAULT = SST_TREXINIT0_DEFAULT
SST_TREX1INIT0_DEFAULT = SST_TREXINIT0_DEFAULT
SST_TREX2INIT0_DEFAULT = SST_TREXINIT0_DEFAULT

# trexInit1
SST_TEX_SCANLINE_INTERLEAVE_MASTER = 0x0
SST_TEX_SCANLINE_INTERLEAVE_SLAVE = bit(0)
SST_EN_TEX_SCANLINE_INTERLEAVE = bit(1)
SST_TEX_FT_FIFO_SIL_SHIFT = 2
SST_TEX_FT_FIFO_SIL = 0x1F << SST_TEX_FT_FIFO_SIL_SHIFT
SST_TEX_TT_FIFO_SIL_SHIFT = 7
SST_TEX_TT_FIFO_SIL = 0xF << SST_TEX_TT_FIFO_SIL_SHIFT
SST_TEX_TF_CLK_DEL_ADJ_SHIFT = 12
SST_TEX_TF_CLK_DEL_ADJ = 0xF << SST_TEX_TF_CLK_DEL_ADJ_SHIFT
SST_TEX_RG_TTCII_INH = bit(16)
SST_TEX_USE_RG_TTCII_INH = bit(17)
SST_TEX_SEND_CONFIG = bit(18)
SST_TEX_RESET_FIFO = bit(19)
SST_TEX_RESET_GRX = bit(20)
SST_TEX_PALETTE_DEL_SHIFT = 21
SST_TEX_PALETTE_DEL = 0x3 << SST_TEX_PALETTE_DEL_SHIFT
SST_TEX_SEND_CONFIG_SEL_SHIFT = 23
SST_TEX_SEND_CONFIG_SEL = 0x7 << SST_TEX_SEND_CONFIG_SEL_SHIFT
SST_TREXINIT1_DEFAULT = (
    SST_TEX_SCANLINE_INTERLEAVE_MASTER
    | (0x8 << SST_TEX_FT_FIFO_SIL_SHIFT)
    | (0x8 << SST_TEX_TT_FIFO_SIL_SHIFT)
    | (0xF << SST_TEX_TF_CLK_DEL_ADJ_SHIFT)
)
SST_TREX0INIT1_DEFAULT = SST_TREXINIT1_DEFAULT
SST_TREX1INIT1_DEFAULT = SST_TREXINIT1_DEFAULT
SST_TREX2INIT1_DEFAULT = SST_TREXINIT1_DEFAULT

# clutData
SST_CLUTDATA_INDEX_SHIFT = 24
SST_CLUTDATA_RED_SHIFT = 16
SST_CLUTDATA_GREEN_SHIFT = 8
SST_CLUTDATA_BLUE_SHIFT = 0

# Video setup shifts
SST_VIDEO_HSYNC_OFF_SHIFT = 16
SST_VIDEO_HSYNC_ON_SHIFT = 0
SST_VIDEO_VSYNC_OFF_SHIFT = 16
SST_VIDEO_VSYNC_ON_SHIFT = 0
SST_VIDEO_HBACKPORCH_SHIFT = 0
SST_VIDEO_VBACKPORCH_SHIFT = 16
SST_VIDEO_XDIM_SHIFT = 0
SST_VIDEO_YDIM_SHIFT = 16

# DAC registers
SST_DACREG_WMA = 0x0
SST_DACREG_LUT = 0x1
SST_DACREG_RMR = 0x2
SST_DACREG_RMA = 0x3
SST_DACREG_ICS_PLLADDR_WR = 0x4
SST_DACREG_ICS_PLLADDR_RD = 0x7
SST_DACREG_ICS_PLLADDR_DATA = 0x5
SST_DACREG_ICS_CMD = 0x6
SST_DACREG_ICS_COLORMODE_16BPP = 0x50
SST_DACREG_ICS_COLORMODE_24BPP = 0x70
SST_DACREG_ICS_PLLADDR_VCLK0 = 0x0
SST_DACREG_ICS_PLLADDR_VCLK1 = 0x1
SST_DACREG_ICS_PLLADDR_VCLK7 = 0x7
SST_DACREG_ICS_PLLADDR_VCLK1_DEFAULT = 0x55
SST_DACREG_ICS_PLLADDR_VCLK7_DEFAULT = 0x71
SST_DACREG_ICS_PLLADDR_GCLK0 = 0xA
SST_DACREG_ICS_PLLADDR_GCLK1 = 0xB
SST_DACREG_ICS_PLLADDR_GCLK1_DEFAULT = 0x79
SST_DACREG_ICS_PLLADDR_CTRL = 0xE
SST_DACREG_ICS_PLLCTRL_CLK1SEL = bit(4)
SST_DACREG_ICS_PLLCTRL_CLK0SEL = bit(5)
SST_DACREG_ICS_PLLCTRL_CLK0FREQ = 0x7
SST_DACREG_INDEXADDR = SST_DACREG_WMA
SST_DACREG_INDEXDATA = SST_DACREG_RMR
SST_DACREG_INDEX_RMR = 0x0
SST_DACREG_INDEX_CR0 = 0x1
SST_DACREG_INDEX_MIR = 0x2
SST_DACREG_INDEX_MIR_ATT_DEFAULT = 0x84
SST_DACREG_INDEX_MIR_TI_DEFAULT = 0x97
SST_DACREG_INDEX_DIR = 0x3
SST_DACREG_INDEX_DIR_ATT_DEFAULT = 0x9
SST_DACREG_INDEX_DIR_TI_DEFAULT = 0x9
SST_DACREG_INDEX_TST = 0x4
SST_DACREG_INDEX_CR1 = 0x5
SST_DACREG_INDEX_CC = 0x6
SST_DACREG_INDEX_AC0 = 0x48
SST_DACREG_INDEX_AC1 = 0x49
SST_DACREG_INDEX_AC2 = 0x4A
SST_DACREG_INDEX_AD0 = 0x4C
SST_DACREG_INDEX_AD1 = 0x4D
SST_DACREG_INDEX_AD2 = 0x4E
SST_DACREG_INDEX_BD0 = 0x6C
SST_DACREG_INDEX_BD1 = 0x6D
SST_DACREG_INDEX_BD2 = 0x6E
SST_DACREG_INDEX_UNREACHABLE = 0xFF

SST_DACREG_CR0_INDEXED_ADDRESSING = bit(0)
SST_DACREG_CR0_8BITDAC = bit(1)
SST_DACREG_CR0_SLEEP = bit(3)
SST_DACREG_CR0_COLOR_MODE_SHIFT = 4
SST_DACREG_CR0_COLOR_MODE = 0xF << SST_DACREG_CR0_COLOR_MODE_SHIFT
SST_DACREG_CR0_COLOR_MODE_16BPP = 0x3 << SST_DACREG_CR0_COLOR_MODE_SHIFT
SST_DACREG_CR0_COLOR_MODE_24BPP = 0x5 << SST_DACREG_CR0_COLOR_MODE_SHIFT
SST_DACREG_CR1_BLANK_PEDASTAL_EN = bit(4)
SST_DACREG_CC_BCLK_SEL_SHIFT = 0
SST_DACREG_CC_BCLK_SELECT_BD = bit(3)
SST_DACREG_CC_ACLK_SEL_SHIFT = 4
SST_DACREG_CC_ACLK_SELECT_AD = bit(7)
SST_DACREG_CLKREG_MSHIFT = 0
SST_DACREG_CLKREG_PSHIFT = 6
SST_DACREG_CLKREG_NSHIFT = 0
SST_DACREG_CLKREG_LSHIFT = 4
SST_DACREG_CLKREG_IBSHIFT = 0

SST_FBI_DACTYPE_ATT = 0
SST_FBI_DACTYPE_ICS = 1
SST_FBI_DACTYPE_TI = 2

SST1INIT_MAX_BOARDS = 16


def _check_byte(name: str, value: int) -> None:
    if not 0 <= value <= 0xFF:
        raise ValueError(f"{name} {value} outside 0..255")


def clut_entry(index: int, red: int, green: int, blue: int) -> int:
    """Pack a colour lookup table entry as written to the clutData register."""
    for name, value in (("index", index), ("red", red), ("green", green), ("blue", blue)):
        _check_byte(name, value)
    return (
        (index << SST_CLUTDATA_INDEX_SHIFT)
        | (red << SST_CLUTDATA_RED_SHIFT)
        | (green << SST_CLUTDATA_GREEN_SHIFT)
        | (blue << SST_CLUTDATA_BLUE_SHIFT)
    )


def decode_clut_entry(value: int) -> tuple[int, int, int, int]:
    """Split a clutData register value into (index, red, green, blue)."""
    _check_register(value)
    return (
        (value >> SST_CLUTDATA_INDEX_SHIFT) & 0xFF,
        (value >> SST_CLUTDATA_RED_SHIFT) & 0xFF,
        (value >> SST_CLUTDATA_GREEN_SHIFT) & 0xFF,
        (value >> SST_CLUTDATA_BLUE_SHIFT) & 0xFF,
    )