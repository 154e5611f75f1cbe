"""Prompt builders for scenario, telemetry, strategy, simulation and chat requests."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from pitwall.models.chat import ChatMessage
from pitwall.models.enums import DrivingStyle, TireCompound, TrackDegradation
from pitwall.models.scenario import RaceScenario, StartingGridEntry
from pitwall.models.strategy import StrategyAnalysis
from pitwall.models.telemetry import TelemetrySample

TELEMETRY_LAPS = 15
TELEMETRY_DRIVERS = 5
FOLLOWER_GAP_PER_POSITION = 0.05

_WEATHER_PATTERN_HINTS = {
    "Predictable": " (e.g., 'Sunny', 'Clear', 'Overcast').",
    "Variable": (
        " (e.g., 'Cloudy with a 60% chance of rain after lap 30'). "
        "The 'availableTires' array MUST include Intermediate and Wet tires."
    ),
    "Wet Race": (
        " (e.g., 'Light Rain', 'Full Wet Conditions'). "
        "The 'availableTires' array MUST include Intermediate and Wet tires."
    ),
}


@dataclass(frozen=True)
class ScenarioOptions:
    """User preferences that constrain a generated scenario.

    Usage:
        ScenarioOptions(track_type="High-Speed", weather_pattern="Wet Race")
    """

    track_type: str = "Any"
    weather_pattern: str = "Any"
    track_degradation: TrackDegradation | None = None


def _compound_list(compounds: Sequence[TireCompound]) -> str:
    return ", ".join(str(c) for c in compounds)


def _degradation(scenario: RaceScenario) -> str:
    return str(scenario.track_degradation or TrackDegradation.MEDIUM)


def _style(entry: StartingGridEntry | None) -> str:
    if entry is None or entry.driving_style is None:
        return str(DrivingStyle.BALANCED)
    return str(entry.driving_style)


def _lead_name(scenario: RaceScenario) -> str:
    lead = scenario.lead_driver
    return lead.driver if lead is not None else "the pole-sitter"


def scenario_prompt(options: ScenarioOptions) -> str:
    prompt = """Generate a realistic and detailed F1 race scenario for a recent F1 season.

CRITICAL INSTRUCTIONS:
1. Track & Laps: Choose a real F1 track and its realistic race distance (e.g., Spa ~44 laps, Monaco ~78 laps). Total laps must be between 40 and 80.
2. Tire Compounds: 'availableTires' MUST use the standard functional names.
   - Dry race: exactly ["Soft", "Medium", "Hard"].
   - Wet or variable race: ["Soft", "Medium", "Hard", "Intermediate", "Wet"].
   - Never use C-ratings such as C1 or C2 in this field.
3. Starting Grid: A full, plausible 20-driver grid. Give every driver a 'drivingStyle' from ["Aggressive", "Smooth", "Balanced"] matching their real-world reputation.
4. Track Degradation: A 'trackDegradation' of "Low", "Medium" or "High" suited to the track (e.g., Bahrain High, Silverstone Medium, Monaco Low).
"""
    if options.track_type and options.track_type != "Any":
        prompt += (
            f"\n- Track Type Constraint: The track must be a prime example of a "
            f"{options.track_type.lower()} circuit. High-speed means Monza, Silverstone "
            "or Spa; technical means Monaco, Hungaroring or Singapore."
        )
    if options.track_degradation and options.track_degradation is not TrackDegradation.MEDIUM:
        prompt += (
            f"\n- Track Degradation Constraint: The track degradation must be "
            f"'{options.track_degradation}'."
        )
    if options.weather_pattern and options.weather_pattern != "Any":
        prompt += (
            f"\n- Weather Constraint: The weather must follow a "
            f"'{options.weather_pattern}' pattern."
        )
        prompt += _WEATHER_PATTERN_HINTS.get(options.weather_pattern, "")

    prompt += "\n\nReturn a single, valid JSON object adhering to the provided schema."
    return prompt


def starting_tire(scenario: RaceScenario) -> TireCompound:
    """Medium when available, else the first available compound."""
    if TireCompound.MEDIUM in scenario.available_tires or not scenario.available_tires:
        return TireCompound.MEDIUM
    return scenario.available_tires[0]


def lead_telemetry_prompt(
    scenario: RaceScenario,
    entry: StartingGridEntry,
    tire: TireCompound,
) -> str:
    degradation = _degradation(scenario)
    style = _style(entry)
    return f"""Based on the F1 race scenario at {scenario.track} ({scenario.weather}, {scenario.race_laps} Laps, {degradation} degradation), simulate detailed telemetry for the first {TELEMETRY_LAPS} laps for the lead driver: {entry.driver}.
This driver has a '{style}' driving style.

RULES FOR REALISM:
1. Starting Tire: The driver starts on the {tire} compound. Every 'tireCompound' value must be exactly "{tire}".
2. Lap 1: The opening lap is slower than the laps that follow.
3. Fuel Effect: Lap times improve gradually for the first 10-12 laps as fuel burns off.
4. Tire Degradation: After the fuel burn-off phase lap times start to degrade. Tire wear must reflect the track's '{degradation}' degradation and the driver's '{style}' style: an 'Aggressive' driver on a 'High' degradation track wears tires far faster than a 'Smooth' driver on a 'Low' one.
5. Metric Consistency: fuelLoad decreases, tireWear increases, temperatures fluctuate realistically.

Return a single JSON object containing a 'telemetry' array for this driver only."""


def follower_telemetry_prompt(
    scenario: RaceScenario,
    entry: StartingGridEntry,
    grid_slot: int,
    tire: TireCompound,
    baseline_lap_times: Sequence[float],
) -> str:
    degradation = _degradation(scenario)
    style = _style(entry)
    offset = grid_slot * FOLLOWER_GAP_PER_POSITION
    baseline = ", ".join(f"{t:g}" for t in baseline_lap_times)
    return f"""Based on the F1 race scenario at {scenario.track} (track degradation: {degradation}), simulate telemetry for the first {TELEMETRY_LAPS} laps for the driver in P{grid_slot}: {entry.driver}.
This driver has a '{style}' driving style.
The lead driver's baseline lap times were: {baseline} seconds.

RULES FOR REALISM:
1. Performance Gap: This driver is consistently slower than the baseline, by about {offset:.2f} to {offset + 0.1:.2f} seconds per lap, with a similar lap time curve.
2. Starting Tire: The driver starts on the {tire} compound. Every 'tireCompound' value must be exactly "{tire}".
3. Tire Wear Model: Tire wear reflects the driver's '{style}' style and the track's '{degradation}' degradation.
4. Metric Consistency: All other metrics (fuelLoad, tireWear, etc.) stay consistent and realistic.

Return a single JSON object containing a 'telemetry' array for this driver only."""


def telemetry_summary(scenario: RaceScenario, telemetry: Sequence[TelemetrySample]) -> str:
    """Summarise the lead driver's first stint for the strategy prompt."""
    lead = scenario.lead_driver
    if lead is None:
        return "No telemetry data available for summary."
    laps = [s for s in telemetry if s.driver == lead.driver]
    if len(laps) < 2:
        return "No telemetry data available for summary."

    first, last = laps[0], laps[-1]
    lines = [f"Lead driver ({first.driver}) telemetry summary over {last.lap} laps on {first.tire_compound} tires:"]
    if first.lap_time is not None and last.lap_time is not None:
        lines.append(f"- Lap 1 Time: {first.lap_time}s.")
        lines.append(
            f"- Lap {last.lap} Time: {last.lap_time}s "
            f"(Delta: {last.lap_time - first.lap_time:.3f}s)."
        )
    if last.tire_wear is not None:
        lines.append(f"- Tire Wear at Lap {last.lap}: {last.tire_wear:.1f}%.")
    lines.append("- This data suggests a performance drop-off due to tire degradation.")
    return "\n".join(lines)


def strategy_prompt(scenario: RaceScenario, telemetry: Sequence[TelemetrySample]) -> str:
    lead = scenario.lead_driver
    lead_name = _lead_name(scenario)
    degradation = _degradation(scenario)
    compounds = ", ".join(f"'{c}'" for c in TireCompound)
    return f"""You are an elite F1 race strategist for a top-tier team. Your analysis must be sharp, insightful and data-driven.

RACE SCENARIO:
- Track: {scenario.track}
- Track Characteristics: Tire degradation is rated as '{degradation}'.
- Total Laps: {scenario.race_laps}
- Weather Forecast: {scenario.weather}
- Available Tire Compounds: {_compound_list(scenario.available_tires)}
- Lead Driver ({lead_name}) Style: {_style(lead)}.

PERFORMANCE DATA (FIRST STINT):
{telemetry_summary(scenario, telemetry)}

STRATEGIC TASK:
Formulate the optimal race strategy for the lead driver, {lead_name}, as a professional report followed by a structured breakdown.

REPORT REQUIREMENTS:
1. Primary Strategy (Plan A): The optimal strategy with exact pit lap(s) and tire sequence (e.g., Medium -> Hard), justified from the telemetry summary and the crossover point where fresh tires repay the pit lane loss.
2. Alternative Strategy (Plan B): A strong counter to a likely event such as an early Safety Car or a weather change, with the trigger for switching.
3. Key Strategic Factors: Undercut/overcut potential at this track, and how the '{degradation}' degradation and the forecast affect both plans.

OUTPUT FORMAT:
Return a single, valid JSON object that strictly adheres to the provided schema.
- 'analysisText' holds the complete report with clear headers and bullet points, without Markdown.
- 'planA' and 'planB' hold the stint details.
- The first stint starts on Lap 1, the last stint ends on Lap {scenario.race_laps}, with no gaps or overlaps between stints.
- Every 'tireCompound' must be one of: {compounds}."""


def simulation_prompt(scenario: RaceScenario, strategy: StrategyAnalysis) -> str:
    lead_name = _lead_name(scenario)
    degradation = _degradation(scenario)
    styles = ", ".join(f"{e.driver}: {_style(e)}" for e in scenario.starting_grid)
    plan = strategy.plan_a
    if plan is not None and plan.first_stint is not None:
        plan_line = f"This driver will follow Plan A: {plan.name}, pitting around lap {plan.first_stint.end_lap}."
    else:
        plan_line = "This driver follows the most sensible strategy for the conditions."
    return f"""You are a sophisticated F1 race simulation engine. Generate a realistic, exciting lap-by-lap summary of a race driven by a detailed tire wear model.

RACE DETAILS:
- Track: {scenario.track}
- Total Laps: {scenario.race_laps}
- Track Degradation: {degradation}
- Starting Grid & Driver Styles: {styles}.
- Lead Driver Strategy ({lead_name}): {plan_line}

TIRE WEAR MODEL (CRITICAL):
1. Wear depends on compound (Softs fastest, then Mediums, then Hards), track degradation ('{degradation}'; High increases wear, Low reduces it) and driving style (Aggressive multiplies wear, Smooth conserves tires).
2. Lap times get progressively slower as wear rises, most severely on Softs.
3. Assign every driver a 'tireCondition' on every lap from their 'tireWear': Fresh 0-15%, Good 16-50%, Worn 51-80%, Aged 81-100% (the "cliff").

SIMULATION RULES:
1. Each lap's 'positions' entry gives every driver's 'tireCompound', 'tireWear' and 'tireCondition'.
2. When a driver's tires become 'Worn' or 'Aged', emit a 'TIRE_WEAR' event describing it.
3. Drivers on worn tires are easily overtaken by drivers on fresher tires.
4. Focus detailed events on the top 10 positions.
5. {lead_name} MUST pit according to the strategy above; invent logical strategies for everyone else.
6. Overtakes must be plausible; generate 'DRS' events after lap 2 when a car is within 1 second on a DRS straight; award the fastest lap realistically; in the final 25% of the race add small fatigue mistakes as 'INFO' events.
7. Every 'INFO' incident (contact, spin, crash, off-track) gets a 'severity' of 'minor', 'moderate' or 'major', scaled by how many cars are involved.
8. Virtual Safety Car probability follows incident severity: minor 5-10%, moderate 40-60%, major 85-95%. During a VSC all drivers slow for 1-2 laps and no overtaking happens.
9. Add 1-3 minor 'MECHANICAL_ISSUE' events that cost a little pace for a few laps but do not end the race.
10. Keep driver characteristics consistent.

OUTPUT FORMAT:
For EACH lap from 1 to {scenario.race_laps}, give the running order and key events. Return a single JSON object with a "simulation" array of lap objects following the provided schema."""


def follow_up_prompt(
    scenario: RaceScenario,
    strategy: StrategyAnalysis,
    history: Sequence[ChatMessage],
) -> str:
    transcript = "\n".join(f"{msg.role}: {msg.content}" for msg in history)
    return f"""You are an expert F1 race strategist acting as a helpful assistant in a conversation with a user. Answer concisely based ONLY on the context below. Do not use external knowledge.

--- START OF CONTEXT ---

RACE SCENARIO:
- Track: {scenario.track}
- Track Degradation: {_degradation(scenario)}
- Total Laps: {scenario.race_laps}
- Weather Forecast: {scenario.weather}
- Available Tire Compounds: {_compound_list(scenario.available_tires)}
- Lead Driver: {_lead_name(scenario)}

STRATEGY ANALYSIS SUMMARY:
{strategy.analysis_text}

--- END OF CONTEXT ---

CHAT HISTORY:
{transcript}"""
