"""Video timing tables for the resolutions and refresh rates the board can drive."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VideoTiming:
    """Sync, porch and clock settings for one resolution at one refresh rate."""

    name: str
    h_sync_on: int
    h_sync_off: int
    v_sync_on: int
    v_sync_off: int
    h_back_porch: int
    v_back_porch: int
    x_dimension: int
    y_dimension: int
    refresh_rate: int
    misc_ctrl: int
    mem_offset: int
    tiles_in_x: int
    v_fifo_threshold: int
    video16bpp_ok: bool
    video24bpp_ok: bool
    clk_freq_16bpp: float
    clk_freq_24bpp: float

    def clock_frequency(self, bits_per_pixel: int) -> float:
        """Return the pixel clock in MHz for a 16 or 24 bit-per-pixel display."""
        if bits_per_pixel == 16:
            supported, frequency = self.video16bpp_ok, self.clk_freq_16bpp
        elif bits_per_pixel == 24:
            supported, frequency = self.video24bpp_ok, self.clk_freq_24bpp
        else:
            raise ValueError(f"bits per pixel must be 16 or 24, got {bits_per_pixel}")
        if not supported:
            raise ValueError(f"{self.name} does not support {bits_per_pixel} bits per pixel")
        return frequency


SST_VREZ_320X200_70 = VideoTiming(
    "SST_VREZ_320X200_70", 96, 704, 2, 447, 48, 35, 320, 200, 70, 0x3, 35, 10, 25,
    True, True, 25.175, 50.350,
)
SST_VREZ_320X200_75 = VideoTiming(
    "SST_VREZ_320X200_75", 99, 733, 3, 429, 52, 25, 320, 200, 75, 0x3, 35, 10, 25,
    True, True, 27.0, 54.0,
)
SST_VREZ_320X200_85 = VideoTiming(
    "SST_VREZ_320X200_85", 63, 767, 3, 442, 94, 41, 320, 200, 85, 0x3, 35, 10, 23,
    True, True, 31.5, 63.0,
)
SST_VREZ_320X200_120 = VideoTiming(
    "SST_VREZ_320X200_120", 67, 798, 3, 424, 94, 16, 320, 200, 120, 0x3, 35, 10, 23,
    True, True, 44.47, 88.94,
)
SST_VREZ_320X240_60 = VideoTiming(
    "SST_VREZ_320X240_60", 96, 704, 2, 523, 38, 25, 320, 240, 60, 0x3, 40, 10, 25,
    True, True, 25.175, 50.350,
)
SST_VREZ_320X240_75 = VideoTiming(
    "SST_VREZ_320X240_75", 63, 775, 3, 497, 118, 16, 320, 240, 75, 0x3, 40, 10, 25,
    True, True, 31.5, 63.0,
)
SST_VREZ_320X240_85 = VideoTiming(
    "SST_VREZ_320X240_85", 55, 776, 3, 506, 78, 25, 320, 240, 85, 0x3, 40, 10, 23,
    True, True, 36.0, 72.0,
)
SST_VREZ_320X240_120 = VideoTiming(
    "SST_VREZ_320X240_120", 45, 785, 3, 506, 100, 18, 320, 240, 120, 0x3, 40, 10, 23,
    True, True, 50.82, 101.64,
)
SST_VREZ_400X300_60 = VideoTiming(
    "SST_VREZ_400X300_60", 39, 471, 3, 619, 54, 18, 400, 300, 60, 0x2, 70, 14, 23,
    True, True, 19.108, 38.216,
)
SST_VREZ_400X300_75 = VideoTiming(
    "SST_VREZ_400X300_75", 39, 487, 3, 624, 62, 23, 400, 300, 75, 0x2, 70, 14, 23,
    True, True, 24.829, 49.658,
)
SST_VREZ_400X300_85 = VideoTiming(
    "SST_VREZ_400X300_85", 39, 487, 3, 627, 62, 26, 400, 300, 85, 0x2, 70, 14, 23,
    True, True, 28.274, 56.548,
)
SST_VREZ_400X300_120 = VideoTiming(
    "SST_VREZ_400X300_120", 39, 503, 3, 640, 70, 39, 400, 300, 120, 0x2, 70, 14, 23,
    True, True, 41.975, 83.950,
)
# Only syncs to arcade-style monitors.
SST_VREZ_512X256_60 = VideoTiming(
    "SST_VREZ_512X256_60", 41, 626, 4, 286, 65, 24, 512, 256, 60, 0, 64, 16, 25,
    False, True, 23.334, 23.334,
)
SST_VREZ_512X384_60 = VideoTiming(
    "SST_VREZ_512X384_60", 55, 615, 3, 792, 78, 23, 512, 384, 60, 0x2, 96, 16, 23,
    True, True, 32.054, 64.108,
)
SST_VREZ_512X384_72 = VideoTiming(
    "SST_VREZ_512X384_72", 51, 591, 3, 430, 55, 25, 512, 384, 72, 0, 96, 16, 23,
    True, True, 20.093, 40.186,
)
SST_VREZ_512X384_75 = VideoTiming(
    "SST_VREZ_512X384_75", 55, 631, 3, 799, 86, 30, 512, 384, 75, 0x2, 96, 16, 23,
    True, True, 41.383, 82.766,
)
SST_VREZ_512X384_75_NOSCANDOUBLE = VideoTiming(
    "SST_VREZ_512X384_75_NOSCANDOUBLE", 47, 591, 3, 399, 62, 14, 512, 384, 75, 0, 96, 16, 23,
    True, True, 19.296, 38.592,
)
SST_VREZ_512X384_85 = VideoTiming(
    "SST_VREZ_512X384_85", 55, 631, 3, 804, 86, 35, 512, 384, 85, 0x2, 96, 16, 23,
    True, True, 47.193, 94.386,
)
SST_VREZ_512X384_85_NOSCANDOUBLE = VideoTiming(
    "SST_VREZ_512X384_85_NOSCANDOUBLE", 55, 599, 3, 401, 70, 16, 512, 384, 85, 0, 96, 16, 23,
    True, True, 22.527, 45.054,
)
SST_VREZ_512X384_120 = VideoTiming(
    "SST_VREZ_512X384_120", 25, 650, 3, 409, 110, 25, 512, 384, 120, 0, 96, 16, 25,
    True, True, 33.5, 67.0,
)
SST_VREZ_640X400_70 = VideoTiming(
    "SST_VREZ_640X400_70", 96, 704, 2, 447, 48, 35, 640, 400, 70, 0, 130, 20, 25,
    True, True, 25.175, 50.350,
)
SST_VREZ_640X400_75 = VideoTiming(
    "SST_VREZ_640X400_75", 99, 733, 3, 429, 52, 25, 640, 400, 75, 0, 130, 20, 25,
    True, True, 27.0, 54.0,
)
SST_VREZ_640X400_85 = VideoTiming(
    "SST_VREZ_640X400_85", 63, 767, 3, 442, 94, 41, 640, 400, 85, 0, 130, 20, 23,
    True, True, 31.5, 63.0,
)
SST_VREZ_640X400_120 = VideoTiming(
    "SST_VREZ_640X400_120", 67, 798, 3, 424, 94, 16, 640, 400, 120, 0, 130, 20, 23,
    True, True, 44.47, 88.94,
)
SST_VREZ_640X480_60 = VideoTiming(
    "SST_VREZ_640X480_60", 96, 704, 2, 523, 38, 25, 640, 480, 60, 0, 150, 20, 25,
    True, True, 25.175, 50.350,
)
SST_VREZ_640X480_75 = VideoTiming(
    "SST_VREZ_640X480_75", 63, 775, 3, 497, 118, 16, 640, 480, 75, 0, 150, 20, 25,
    True, True, 31.5, 63.0,
)
SST_VREZ_640X480_85 = VideoTiming(
    "SST_VREZ_640X480_85", 55, 776, 3, 506, 78, 25, 640, 480, 85, 0, 150, 20, 23,
    True, True, 36.0, 72.0,
)
SST_VREZ_640X480_120 = VideoTiming(
    "SST_VREZ_640X480_120", 45, 785, 3, 506, 100, 18, 640, 480, 120, 0, 150, 20, 23,
    True, True, 50.82, 101.64,
)
# 800x600 uses 832x608 worth of memory.
SST_VREZ_800X600_60 = VideoTiming(
    "SST_VREZ_800X600_60", 127, 927, 4, 624, 86, 23, 800, 600, 60, 0, 247, 26, 23,
    True, True, 40.0, 80.0,
)
SST_VREZ_800X600_75 = VideoTiming(
    "SST_VREZ_800X600_75", 79, 975, 3, 622, 158, 21, 800, 600, 75, 0, 247, 26, 21,
    True, True, 49.5, 99.0,
)
SST_VREZ_800X600_85 = VideoTiming(
    "SST_VREZ_800X600_85", 63, 983, 3, 628, 150, 27, 800, 600, 85, 0, 247, 26, 19,
    True, True, 56.25, 112.5,
)
SST_VREZ_800X600_120 = VideoTiming(
    "SST_VREZ_800X600_120", 87, 999, 3, 640, 142, 39, 800, 600, 120, 0, 247, 26, 17,
    True, False, 83.950, 83.950,
)
# 856x480 uses 896x480 worth of memory.
SST_VREZ_856X480_60 = VideoTiming(
    "SST_VREZ_856X480_60", 136, 1008, 2, 523, 100, 23, 856, 480, 60, 0, 210, 28, 16,
    True, True, 36.0, 72.0,
)
# 960x720 uses 960x736 worth of memory.
SST_VREZ_960X720_60 = VideoTiming(
    "SST_VREZ_960X720_60", 103, 1151, 3, 743, 142, 22, 960, 720, 60, 0, 345, 30, 19,
    True, True, 56.219, 112.437,
)
SST_VREZ_960X720_75 = VideoTiming(
    "SST_VREZ_960X720_75", 103, 1183, 3, 749, 158, 28, 960, 720, 75, 0, 345, 30, 19,
    True, False, 72.643, 72.643,
)
SST_VREZ_960X720_85 = VideoTiming(
    "SST_VREZ_960X720_85", 103, 1199, 3, 753, 166, 32, 960, 720, 85, 0, 345, 30, 19,
    True, False, 83.795, 83.795,
)
SST_VREZ_1024X768_60 = VideoTiming(
    "SST_VREZ_1024X768_60", 136, 1208, 6, 800, 160, 29, 1024, 768, 60, 0, 384, 32, 16,
    True, False, 65.0, 130.0,
)
SST_VREZ_1024X768_75 = VideoTiming(
    "SST_VREZ_1024X768_75", 96, 1216, 3, 797, 176, 28, 1024, 768, 75, 0, 384, 32, 16,
    True, False, 78.75, 78.75,
)
SST_VREZ_1024X768_85 = VideoTiming(
    "SST_VREZ_1024X768_85", 96, 1280, 3, 805, 208, 36, 1024, 768, 85, 0, 384, 32, 16,
    True, False, 94.5, 94.5,
)

_TIMINGS: tuple[VideoTiming, ...] = (
    SST_VREZ_320X200_70,
    SST_VREZ_320X200_75,
    SST_VREZ_320X200_85,
    SST_VREZ_320X200_120,
    SST_VREZ_320X240_60,
    SST_VREZ_320X240_75,
    SST_VREZ_320X240_85,
    SST_VREZ_320X240_120,
    SST_VREZ_400X300_60,
    SST_VREZ_400X300_75,
    SST_VREZ_400X300_85,
    SST_VREZ_400X300_120,
    SST_VREZ_512X256_60,
    SST_VREZ_512X384_60,
    SST_VREZ_512X384_72,
    SST_VREZ_512X384_75,
    SST_VREZ_512X384_75_NOSCANDOUBLE,
    SST_VREZ_512X384_85,
    SST_VREZ_512X384_85_NOSCANDOUBLE,
    SST_VREZ_512X384_120,
    SST_VREZ_640X400_70,
    SST_VREZ_640X400_75,
    SST_VREZ_640X400_85,
    SST_VREZ_640X400_120,
    SST_VREZ_640X480_60,
    SST_VREZ_640X480_75,
    SST_VREZ_640X480_85,
    SST_VREZ_640X480_120,
    SST_VREZ_800X600_60,
    SST_VREZ_800X600_75,
    SST_VREZ_800X600_85,
    SST_VREZ_800X600_120,
    SST_VREZ_856X480_60,
    SST_VREZ_960X720_60,
    SST_VREZ_960X720_75,
    SST_VREZ_960X720_85,
    SST_VREZ_1024X768_60,
    SST_VREZ_1024X768_75,
    SST_VREZ_1024X768_85,
)


def available_timings() -> tuple[VideoTiming, ...]:
    """Return every known video timing, smallest resolution first."""
    return _TIMINGS


def find_video_timing(width: int, height: int, refresh: int) -> VideoTiming | None:
    """Return the first timing for this resolution and refresh rate, or None."""
    return next(
        (
            timing
            for timing in _TIMINGS
            if (timing.x_dimension, timing.y_dimension, timing.refresh_rate)
            == (width, height, refresh)
        ),
        None,
    )