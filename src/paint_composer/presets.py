"""Read-only catalogs: one-click gradient presets and the pattern gallery."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Preset:
    name: str
    css: str


GRADIENT_PRESETS: tuple[Preset, ...] = (
    Preset("Purple Dream", "linear-gradient(43deg, #4158D0 0%, #C850C0 46%, #FFCC70 100%)"),
    Preset("Ocean Blue", "linear-gradient(160deg, #0093E9 0%, #80D0C7 100%)"),
    Preset("Pink Sunset", "linear-gradient(45deg, #FA8BFF 0%, #2BD2FF 52%, #2BFF88 90%)"),
    Preset("Aqua Splash", "linear-gradient(0deg, #08AEEA 0%, #2AF598 100%)"),
    Preset("Purple Magic", "linear-gradient(19deg, #21D4FD 0%, #B721FF 100%)"),
    Preset("Sunset Fire", "linear-gradient(147deg, #FFE53B 0%, #FF2525 74%)"),
    Preset("Mint Fresh", "linear-gradient(90deg, #74EBD5 0%, #9FACE6 100%)"),
    Preset("Royal Purple", "linear-gradient(220.55deg, #A531DC 0%, #4300B1 100%)"),
    Preset("Fire Red", "linear-gradient(220.55deg, #FF896D 0%, #D02020 100%)"),
    Preset("Deep Blue", "linear-gradient(220.55deg, #3793FF 0%, #0017E4 100%)"),
    Preset("Golden Sun", "linear-gradient(220.55deg, #FFD439 0%, #FF7A00 100%)"),
    Preset("Sky Blue", "linear-gradient(220.55deg, #7CF7FF 0%, #4B73FF 100%)"),
    Preset("Pink Lemon", "linear-gradient(220.55deg, #FFED46 0%, #FF7EC7 100%)"),
    Preset(
        "Instagram",
        "radial-gradient(circle at 30% 110%, #ffdb8b 0%,#ee653d 25%,#d42e81 50%,"
        "#a237b6 75%,#3e5fbc 100%)",
    ),
    Preset("Rainbow", "linear-gradient(115deg,#4fcf70,#fad648,#a767e5,#12bcfe,#44ce7b)"),
    Preset("Sea Wave", "linear-gradient(180deg,#04e2f7, #1448d8)"),
    Preset("Purple Pink", "linear-gradient(180deg,#11AEEB, #c13af1)"),
    Preset("Mint Green", "linear-gradient(180deg,#11AEEB, #35F39D)"),
    Preset("Cotton Candy", "linear-gradient(180deg,#E3FFFD, #FFEDFB)"),
    Preset("Peach", "linear-gradient(180deg,#FB1834, #FB2B90)"),
    Preset("Night Sky", "linear-gradient(180deg,#2C3E50, #4CA0AE)"),
    Preset("Electric Blue", "linear-gradient(180deg,#0C52C4, #00B1F3)"),
    Preset("Coral Reef", "linear-gradient(to right, rgb(255, 91, 87), rgb(170, 228, 215))"),
    Preset(
        "Sunset Gradient", "linear-gradient(to right, rgb(254, 190, 88), rgb(222, 43, 174))"
    ),
    Preset(
        "Forest Green", "radial-gradient(at center bottom, rgb(120, 53, 15), rgb(252, 211, 77))"
    ),
    Preset(
        "Violet Dream", "radial-gradient(at center center, rgb(88, 28, 135), rgb(99, 102, 241))"
    ),
    Preset(
        "Dark Violet", "linear-gradient(rgb(17, 24, 39), rgb(88, 28, 135), rgb(124, 58, 237))"
    ),
    Preset(
        "Warm Flame",
        "conic-gradient(at right center, rgb(127, 29, 29), rgb(221, 214, 254), "
        "rgb(249, 115, 22))",
    ),
    Preset("Orange Sky", "linear-gradient(to top, rgb(251, 146, 60), rgb(56, 189, 248))"),
    Preset(
        "Purple Haze", "linear-gradient(to right top, rgb(139, 92, 246), rgb(253, 186, 116))"
    ),
)

_W = "rgba(255,255,255,0.4)"

# index 0 in a pattern paint means "none"; entry i lives at PATTERN_PRESETS[i - 1]
PATTERN_PRESETS: tuple[Preset, ...] = (
    Preset(
        "Grid",
        f"background: linear-gradient({_W} 1px, transparent 1px), linear-gradient(to right, "
        f"{_W} 1px, transparent 1px); background-size: 20px 20px;",
    ),
    Preset(
        "Dots",
        f"background: radial-gradient(circle, {_W}, {_W} 50%, transparent 50%); "
        "background-size: 10px 10px;",
    ),
    Preset(
        "Circles",
        "background: radial-gradient(circle, transparent 20%, rgba(255,255,255,0) 20%, "
        "rgba(255,255,255,0) 80%, transparent 80%); background-size: 50px 50px;",
    ),
    Preset(
        "Diagonal",
        f"background: repeating-linear-gradient(45deg, {_W}, {_W} 5px, transparent 5px, "
        "transparent 25px);",
    ),
    Preset(
        "Checkers",
        f"background: linear-gradient(45deg, {_W} 25%, transparent 25%), linear-gradient(-45deg, "
        f"{_W} 25%, transparent 25%), linear-gradient(45deg, transparent 75%, {_W} 75%), "
        f"linear-gradient(-45deg, transparent 75%, {_W} 75%); background-size: 20px 20px; "
        "background-position: 0 0, 0 10px, 10px -10px, -10px 0px;",
    ),
    Preset(
        "Cross",
        f"background: linear-gradient(rgba(255,255,255,0) 50%, {_W} 50%), linear-gradient(to "
        f"right, rgba(255,255,255,0) 50%, {_W} 50%); background-size: 20px 20px;",
    ),
    Preset(
        "Zigzag",
        f"background: linear-gradient(135deg, {_W} 25%, transparent 25%), linear-gradient(225deg, "
        f"{_W} 25%, transparent 25%), linear-gradient(45deg, {_W} 25%, transparent 25%), "
        f"linear-gradient(315deg, {_W} 25%, transparent 25%); background-size: 20px 20px; "
        "background-position: 10px 0, 10px 0, 0 0, 0 0;",
    ),
    Preset(
        "Stripes V",
        f"background: linear-gradient(to right, {_W}, {_W} 5px, transparent 5px, transparent); "
        "background-size: 10px 100%;",
    ),
    Preset(
        "Stripes H",
        f"background: linear-gradient(0deg, transparent 50%, {_W} 50%); "
        "background-size: 10px 10px;",
    ),
    Preset(
        "Small Dots",
        f"background: radial-gradient({_W} 0.5px, transparent 0.5px), radial-gradient({_W} "
        "0.5px, transparent 0.5px); background-size: 20px 20px; "
        "background-position: 0 0, 10px 10px;",
    ),
    Preset(
        "Plus",
        f"background: linear-gradient({_W} 2px, transparent 2px), linear-gradient(90deg, {_W} "
        "2px, transparent 2px); background-size: 50px 50px;",
    ),
    Preset(
        "Honeycomb",
        f"background: linear-gradient(30deg, {_W} 12%, transparent 12.5%, transparent 87%, {_W} "
        f"87.5%), linear-gradient(150deg, {_W} 12%, transparent 12.5%, transparent 87%, {_W} "
        f"87.5%), linear-gradient(30deg, {_W} 12%, transparent 12.5%, transparent 87%, {_W} "
        f"87.5%), linear-gradient(150deg, {_W} 12%, transparent 12.5%, transparent 87%, {_W} "
        "87.5%); background-size: 20px 35px; background-position: 0 0, 0 0, 10px 18px, "
        "10px 18px;",
    ),
)


def gradient_preset(index: int) -> Preset:
    if not 0 <= index < len(GRADIENT_PRESETS):
        raise ValueError(f"no gradient preset at index {index}")
    return GRADIENT_PRESETS[index]


__all__ = [
    "GRADIENT_PRESETS",
    "PATTERN_PRESETS",
    "Preset",
    "gradient_preset",
]
