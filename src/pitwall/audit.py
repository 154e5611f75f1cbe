"""Rule-based audit of AI-generated tire strategies.

The model that proposes Plan A / Plan B has no hard constraints, so every
analysis is checked after the fact for three kinds of risk:

* slick tires planned in the rain, or rain tires planned in the dry
* Soft or Medium stints longer than the compound can realistically last
* a first stint whose projected wear, extrapolated from the lead driver's
  telemetry, ends above ``PROJECTED_WEAR_LIMIT`` percent

Checks never raise. A plan, stint list or telemetry series that is missing
or too short simply produces no warning for the check that needed it.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from pitwall.models.enums import TireCompound
from pitwall.models.scenario import RaceScenario
from pitwall.models.strategy import StrategyAnalysis, StrategyPlan, StrategyStint
from pitwall.models.telemetry import TelemetrySample

SOFT_STINT_MIN_LAPS = 15
SOFT_STINT_RACE_SHARE = 0.35
MEDIUM_STINT_MIN_LAPS = 25
MEDIUM_STINT_RACE_SHARE = 0.60
PROJECTED_WEAR_LIMIT = 90.0


def soft_stint_limit(race_laps: int) -> int:
    """Longest acceptable Soft stint: 35% of race distance, at least 15 laps."""
    return max(SOFT_STINT_MIN_LAPS, math.floor(race_laps * SOFT_STINT_RACE_SHARE))


def medium_stint_limit(race_laps: int) -> int:
    """Longest acceptable Medium stint: 60% of race distance, at least 25 laps."""
    return max(MEDIUM_STINT_MIN_LAPS, math.floor(race_laps * MEDIUM_STINT_RACE_SHARE))


# ── Per-stint rules ─────────────────────────────────────────────────────────


@dataclass(frozen=True)
class StintContext:
    """Everything a per-stint rule may look at."""

    plan_name: str
    stint: StrategyStint
    race_laps: int
    is_rainy: bool


@dataclass(frozen=True)
class StintRule:
    """A named predicate over one stint and the warning it produces."""

    name: str
    applies: Callable[[StintContext], bool]
    message: Callable[[StintContext], str]

    def check(self, ctx: StintContext) -> str | None:
        return self.message(ctx) if self.applies(ctx) else None


STINT_RULES: tuple[StintRule, ...] = (
    StintRule(
        name="slick_in_rain",
        applies=lambda ctx: ctx.is_rainy and not ctx.stint.tire_compound.is_wet_weather,
        message=lambda ctx: (
            f"{ctx.plan_name}: Uses a slick tire ({ctx.stint.tire_compound}) in rainy "
            "conditions, which is extremely dangerous and ineffective."
        ),
    ),
    StintRule(
        name="rain_tire_in_dry",
        applies=lambda ctx: not ctx.is_rainy and ctx.stint.tire_compound.is_wet_weather,
        message=lambda ctx: (
            f"{ctx.plan_name}: Uses a wet-weather tire ({ctx.stint.tire_compound}) in dry "
            "conditions, which will result in rapid overheating and poor performance."
        ),
    ),
    StintRule(
        name="long_soft_stint",
        applies=lambda ctx: (
            ctx.stint.tire_compound is TireCompound.SOFT
            and ctx.stint.duration > soft_stint_limit(ctx.race_laps)
        ),
        message=lambda ctx: (
            f"{ctx.plan_name}: The planned Soft tire stint of {ctx.stint.duration} laps "
            'is very long and risks a severe performance drop-off ("cliff").'
        ),
    ),
    StintRule(
        name="long_medium_stint",
        applies=lambda ctx: (
            ctx.stint.tire_compound is TireCompound.MEDIUM
            and ctx.stint.duration > medium_stint_limit(ctx.race_laps)
        ),
        message=lambda ctx: (
            f"{ctx.plan_name}: The planned Medium tire stint of {ctx.stint.duration} laps "
            "is ambitious and may lead to high degradation towards the end."
        ),
    ),
)


def check_plan_stints(
    plan: StrategyPlan,
    scenario: RaceScenario,
    rules: Iterable[StintRule] = STINT_RULES,
) -> list[str]:
    """Run every stint rule over every stint of *plan*."""
    rules = tuple(rules)
    warnings: list[str] = []
    for stint in plan.stints:
        ctx = StintContext(
            plan_name=plan.name,
            stint=stint,
            race_laps=scenario.race_laps,
            is_rainy=scenario.is_rainy,
        )
        for rule in rules:
            message = rule.check(ctx)
            if message is not None:
                warnings.append(message)
    return warnings


# ── Telemetry projection ────────────────────────────────────────────────────


@dataclass(frozen=True)
class WearTrend:
    """Linear wear rate observed over the lead driver's telemetry."""

    compound: TireCompound
    last_lap: int
    last_wear: float
    wear_per_lap: float

    def project(self, planned_duration: int) -> float:
        """Wear at the end of a stint of *planned_duration* laps."""
        return self.last_wear + self.wear_per_lap * (planned_duration - self.last_lap)


def lead_driver_wear_trend(
    scenario: RaceScenario,
    telemetry: Iterable[TelemetrySample],
) -> WearTrend | None:
    """Derive the lead driver's wear rate, or None when the data cannot support one."""
    lead = scenario.lead_driver
    if lead is None:
        return None

    samples = sorted(
        (s for s in telemetry if s.driver == lead.driver and s.lap > 0),
        key=lambda s: s.lap,
    )
    if len(samples) < 2:
        return None

    first, last = samples[0], samples[-1]
    if last.tire_wear is None:
        return None

    laps_driven = last.lap - first.lap + 1
    # First-lap wear is the baseline; it is not always zero
    wear_in_period = last.tire_wear - (first.tire_wear or 0)
    if laps_driven <= 0 or wear_in_period <= 0:
        return None

    return WearTrend(
        compound=first.tire_compound,
        last_lap=last.lap,
        last_wear=last.tire_wear,
        wear_per_lap=wear_in_period / laps_driven,
    )


def _whole_percent(value: float) -> str:
    return str(Decimal(value).quantize(Decimal("1"), rounding=ROUND_HALF_UP))


def check_first_stint_wear(plan: StrategyPlan, trend: WearTrend) -> str | None:
    """Warn when the plan's first stint outlasts the observed wear rate."""
    first = plan.first_stint
    if first is None or first.tire_compound is not trend.compound:
        return None

    projected = trend.project(first.duration)
    if projected <= PROJECTED_WEAR_LIMIT:
        return None
    return (
        f"{plan.name}: Telemetry data projects tire wear for the first stint to reach "
        f"over 90% ({_whole_percent(projected)}%). This is a high-risk strategy."
    )


# ── Entry point ─────────────────────────────────────────────────────────────


def evaluate_strategy(
    strategy: StrategyAnalysis | None,
    scenario: RaceScenario,
    telemetry: Iterable[TelemetrySample] = (),
) -> list[str]:
    """Return the unique warnings raised by *strategy* for *scenario*.

    Order follows first occurrence (stint rules for Plan A, then Plan B, then
    telemetry projections) but callers should treat the result as a set.
    """
    if strategy is None:
        return []

    plans = strategy.plans
    warnings: list[str] = []
    for plan in plans:
        warnings.extend(check_plan_stints(plan, scenario))

    trend = lead_driver_wear_trend(scenario, telemetry)
    if trend is not None:
        for plan in plans:
            message = check_first_stint_wear(plan, trend)
            if message is not None:
                warnings.append(message)

    return list(dict.fromkeys(warnings))
