"""Hue-aware assignment of swatches to the six hue-bearing ANSI slots.

Routes extracted wallpaper swatches to their semantically correct ANSI
color slots using OKLCH hue angles. Slots with no natural match get a
color synthesized by rotating a donor's hue to the slot's target and
reducing its chroma.

Algorithm:
1. Convert swatches to OKLCH, separate chromatic from achromatic
2. Build each slot's candidates: chromatic swatches within
   ``max_hue_distance`` of the slot's target, nearest first (ties: higher
   population first)
3. Order slots once by initial candidate count, fewest first
4. Greedy: each slot takes its first candidate not already taken
5. Synthesize the remaining slots from the nearest assigned donor

This is a heuristic, not an optimal matching: a constrained slot can take
a swatch that a later slot would have matched more closely.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

from themepal import defaults
from themepal.colorspace import OKLCH, hexes_to_oklch, normalize_hex, oklch_to_hex
from themepal.types import ANSI_HUE_SLOTS, AnsiHueSlot, SwatchInput

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HueMappingConfig:
    """Thresholds for swatch-to-slot assignment."""
    min_reliable_chroma: float = defaults.MIN_RELIABLE_CHROMA
    max_hue_distance: float = defaults.MAX_HUE_DISTANCE
    synthesis_chroma_factor: float = defaults.SYNTHESIS_CHROMA_FACTOR
    neutral_donor: OKLCH = OKLCH(*defaults.NEUTRAL_DONOR_OKLCH)


_DEFAULT_CONFIG = HueMappingConfig()


def hue_distance(h1: float, h2: float) -> float:
    """Circular distance on the 0-360 hue wheel. Returns [0, 180]."""
    d = abs(h1 - h2) % 360
    return 360 - d if d > 180 else d


@dataclass(eq=False)
class _ResolvedSwatch:
    hex: str
    oklch: OKLCH
    population: int


def _classify(
    swatches: list[SwatchInput],
    config: HueMappingConfig,
) -> tuple[list[_ResolvedSwatch], list[_ResolvedSwatch]]:
    """Split swatches into (chromatic, achromatic), dropping unparseable ones."""
    chromatic: list[_ResolvedSwatch] = []
    achromatic: list[_ResolvedSwatch] = []

    for sw, lch in zip(swatches, hexes_to_oklch(sw.hex for sw in swatches)):
        if lch is None:
            logger.debug("Skipping swatch with invalid color %r", sw.hex)
            continue
        resolved = _ResolvedSwatch(hex=normalize_hex(sw.hex), oklch=lch, population=sw.population)
        if lch.c < config.min_reliable_chroma:
            achromatic.append(resolved)
        else:
            chromatic.append(resolved)

    return chromatic, achromatic


def _candidates_for(
    slot: AnsiHueSlot,
    chromatic: list[_ResolvedSwatch],
    config: HueMappingConfig,
) -> list[_ResolvedSwatch]:
    target = slot.target_hue
    viable = [sw for sw in chromatic if hue_distance(sw.oklch.h, target) <= config.max_hue_distance]
    return sorted(viable, key=lambda sw: (hue_distance(sw.oklch.h, target), -sw.population))


def _find_donor(
    slot: AnsiHueSlot,
    assigned: dict[AnsiHueSlot, _ResolvedSwatch],
    achromatic: list[_ResolvedSwatch],
    config: HueMappingConfig,
) -> OKLCH:
    """Donor for a missing slot.

    Prefers the assigned slot whose target hue is nearest, then the most
    populous achromatic swatch, then a neutral midtone.
    """
    target = slot.target_hue

    if assigned:
        best: Optional[_ResolvedSwatch] = None
        best_dist = float("inf")
        for other, sw in assigned.items():
            dist = hue_distance(other.target_hue, target)
            if dist < best_dist:
                best_dist = dist
                best = sw
        return best.oklch

    if achromatic:
        best = achromatic[0]
        for sw in achromatic[1:]:
            if sw.population > best.population:
                best = sw
        return best.oklch

    return config.neutral_donor


def synthesize_color(donor: OKLCH, target_hue: float, chroma_factor: float = defaults.SYNTHESIS_CHROMA_FACTOR) -> str:
    """Rotate *donor* to *target_hue* with scaled chroma, keeping lightness."""
    return oklch_to_hex(OKLCH(l=donor.l, c=donor.c * chroma_factor, h=target_hue))


def assign_swatches_to_ansi_slots(
    swatches: Iterable[SwatchInput],
    config: Optional[HueMappingConfig] = None,
) -> dict[AnsiHueSlot, str]:
    """Assign swatches to the 6 hue-bearing ANSI slots by OKLCH hue proximity.

    Args:
        swatches: Candidate colors with population weights, in any order
        config: Assignment thresholds (default: HueMappingConfig())

    Returns:
        Hex color for every AnsiHueSlot, in canonical slot order. Never
        fails; an empty input yields six colors synthesized from a neutral
        midtone.
    """
    config = config if config is not None else _DEFAULT_CONFIG
    chromatic, achromatic = _classify(list(swatches), config)

    candidates = {slot: _candidates_for(slot, chromatic, config) for slot in ANSI_HUE_SLOTS}
    # Fixed once from the initial candidate counts; stable for equal counts
    slot_order = sorted(ANSI_HUE_SLOTS, key=lambda slot: len(candidates[slot]))

    assigned: dict[AnsiHueSlot, _ResolvedSwatch] = {}
    used: set[_ResolvedSwatch] = set()
    for slot in slot_order:
        for sw in candidates[slot]:
            if sw not in used:
                assigned[slot] = sw
                used.add(sw)
                break

    logger.debug(
        "Slot order %s; assigned %s",
        [s.value for s in slot_order],
        {s.value: sw.hex for s, sw in assigned.items()},
    )

    result: dict[AnsiHueSlot, str] = {}
    for slot in ANSI_HUE_SLOTS:
        match = assigned.get(slot)
        if match is not None:
            result[slot] = match.hex
            continue
        donor = _find_donor(slot, assigned, achromatic, config)
        result[slot] = synthesize_color(donor, slot.target_hue, config.synthesis_chroma_factor)
        logger.debug("Synthesized %s=%s from donor %s", slot.value, result[slot], donor)

    return result


def ansi_slots_to_base_colors(assignment: dict[AnsiHueSlot, str]) -> dict[str, str]:
    """Key an assignment by base color name, ready for ``derive_all_colors``."""
    return {slot.value: hex_color for slot, hex_color in assignment.items()}
