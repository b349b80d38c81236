# services/energy_engine/results_generator.py
# Content dictionary keyed by archetype, and assembly of the full report
# the presentation layer renders from a QuizResult.

import logging
from typing import Dict, List, Mapping, Union

from services.energy_engine.models import (
    Archetype,
    ArchetypeProfile,
    ContentConfigurationError,
    CorePattern,
    Dimension,
    DimensionScores,
    EnergyReport,
    NEGATIVELY_KEYED_DIMENSIONS,
    QuizResult,
    RankedDimension,
    ResetDay,
    SnapshotTag,
    StatusLevel,
)

logger = logging.getLogger(__name__)

FALLBACK_ARCHETYPE = Archetype.AWAKENING

# --- Archetype Content ---

ARCHETYPE_PROFILES: Dict[Archetype, ArchetypeProfile] = {
    Archetype.RESTING: ArchetypeProfile(
        name="The Resting Phase",
        description=(
            "Your system has been running on reserves for a long time. Rest is not a reward "
            "you earn here, it is the ground everything else will grow from."
        ),
        oto_message=(
            "You have carried so much for so long. The 21-Day Energy Reset gives you gentle, "
            "five-minute practices that refill your reserves without adding another thing to prove."
        ),
    ),
    Archetype.AWAKENING: ArchetypeProfile(
        name="The Awakening Phase",
        description=(
            "You can see your patterns clearly now, even when old habits still take the wheel. "
            "Awareness is already changing how you spend your energy."
        ),
        oto_message=(
            "You already know what you need. The 21-Day Energy Reset turns that knowing into a "
            "daily rhythm, so your good intentions finally have structure to lean on."
        ),
    ),
    Archetype.RISING: ArchetypeProfile(
        name="The Rising Phase",
        description=(
            "Your foundations are in place and your energy is building momentum. The work now "
            "is refinement: protecting what is working and closing the last few leaks."
        ),
        oto_message=(
            "You are so close to a steady, sustainable flow. The 21-Day Energy Reset helps you "
            "hold your boundaries under pressure and make your new habits unshakeable."
        ),
    ),
    Archetype.RADIANT: ArchetypeProfile(
        name="The Radiant Phase",
        description=(
            "You are living from deep alignment. You give from overflow rather than depletion, "
            "and your energy naturally draws in what you desire."
        ),
        oto_message=(
            "Your energy is a gift to everyone around you. The 21-Day Energy Reset helps you "
            "deepen this alignment and keep it steady through every season of life."
        ),
    ),
}

CORE_PATTERNS: Dict[Archetype, CorePattern] = {
    Archetype.RESTING: CorePattern(
        narrative=(
            "You have been the pillar of strength for those around you for so long that your "
            "own body and emotions have been quietly bearing the cost."
        ),
        behaviors=[
            "You instinctively take on more than you can manage, even when your body is signalling the need for rest.",
            "A sense of guilt arises when you consider investing time, resources, or attention in yourself.",
            "Your sleep quality, energy levels, or overall health feel inconsistent, making it difficult to rely on your own body.",
            "You are learning to receive more openly, yet when good things begin to grow, an underlying fear of loss can surface.",
        ],
        root_cause=(
            "At its core, your system still operates on the belief that safety depends on maintaining "
            "control over everything. Until this pattern shifts, your energy reserves will continue to "
            "deplete under pressure."
        ),
    ),
    Archetype.AWAKENING: CorePattern(
        narrative=(
            "You are becoming increasingly aware of your patterns, yet the deeply ingrained survival "
            "mechanisms still take over during moments of stress."
        ),
        behaviors=[
            "You understand what self-care requires, yet find it challenging to maintain consistency.",
            "Periods of clarity are interspersed with a return to familiar, less supportive habits.",
            "You recognise people-pleasing tendencies in yourself, and feel frustrated when they resurface.",
            "Progress can feel uneven, but each step forward, however small, is building genuine momentum.",
        ],
        root_cause=(
            "Your nervous system is in the process of rewiring, and it requires consistent, patient "
            "practice to establish trust in change. The instability you feel is a natural indicator "
            "of meaningful growth."
        ),
    ),
    Archetype.RISING: CorePattern(
        narrative=(
            "You have invested significant effort in your personal development, and your energy is "
            "steadily building momentum. The foundation is sound; the focus now is on refinement "
            "and deepening."
        ),
        behaviors=[
            "You have established boundaries, though maintaining them under pressure can still be a challenge.",
            "Self-care practices are in place, yet life's demands occasionally interrupt your routine.",
            "You are increasingly discerning about where you direct your energy, though guilt may still arise at times.",
            "Meaningful transformation feels within reach; the next step is deepening your trust in the process.",
        ],
        root_cause=(
            "Your system is learning to sustain a higher level of vitality, though older patterns of "
            "fear may occasionally re-emerge. Keep reinforcing the healthier pathways you have been "
            "cultivating."
        ),
    ),
    Archetype.RADIANT: CorePattern(
        narrative=(
            "You have cultivated a state of deep, authentic alignment, and your energy naturally "
            "draws in what you desire. The focus now is on sustaining and expanding this harmony."
        ),
        behaviors=[
            "Self-care has become an integral, non-negotiable part of your daily life.",
            "You give generously from a place of abundance rather than depletion.",
            "Your boundaries are clearly defined and upheld with grace and confidence.",
            "You are positioned to guide and uplift others while preserving your own well-being.",
        ],
        root_cause=(
            "Your system has moved from survival mode to a creative, generative state. The path ahead "
            "is about deepening this alignment and sharing your wisdom with those around you."
        ),
    ),
}

RESET_PLANS: Dict[Archetype, List[ResetDay]] = {
    Archetype.RESTING: [
        ResetDay(category="BODY", practice="Do 3 rounds of 4-7-8 breathing before scrolling or checking messages in the morning."),
        ResetDay(category="EMOTIONS", practice="Choose one moment daily to ask: \"What emotion am I running from right now?\" and breathe with it for 60 seconds."),
        ResetDay(category="MIND", practice="Rewrite one limiting thought into an empowering one and speak it out loud three times."),
        ResetDay(category="SPIRIT", practice="Spend 5 minutes in stillness: no guided meditation, just you and silence."),
        ResetDay(category="SUPPORT", practice="Ask for one small thing from someone today. Practice receiving without explaining yourself."),
        ResetDay(category="BODY", practice="Stretch gently for 10 minutes before bed. Let your body release the day."),
        ResetDay(category="INTEGRATION", practice="Review your week. What felt different? Journal for 10 minutes on your shifts."),
    ],
    Archetype.AWAKENING: [
        ResetDay(category="BODY", practice="Morning body scan: 5 minutes checking in with each part of your body without judgment."),
        ResetDay(category="EMOTIONS", practice="Name three emotions you felt yesterday. Just name them: no story, no fix."),
        ResetDay(category="MIND", practice="Catch one thought spiral today and consciously redirect it with a power question."),
        ResetDay(category="SPIRIT", practice="10 minutes of conscious breathing, following only the breath entering and leaving."),
        ResetDay(category="SUPPORT", practice="Share one vulnerable truth with someone you trust. Notice how it feels."),
        ResetDay(category="BODY", practice="Move for 20 minutes in any way that feels good: walking, dancing, yoga."),
        ResetDay(category="INTEGRATION", practice="Celebrate three wins from this week, no matter how small."),
    ],
    Archetype.RISING: [
        ResetDay(category="BODY", practice="Wake up 15 minutes earlier for a morning ritual that is just for you."),
        ResetDay(category="EMOTIONS", practice="Practice feeling joy without waiting for a reason. Generate it from within."),
        ResetDay(category="MIND", practice="Visualise your ideal day in detail before it begins. Feel it as already done."),
        ResetDay(category="SPIRIT", practice="Create space for inspired action. When guidance comes, take one small step immediately."),
        ResetDay(category="SUPPORT", practice="Audit your energy exchanges. Are you giving more than you receive anywhere?"),
        ResetDay(category="BODY", practice="Upgrade one health habit: water, food, or sleep. Choose one."),
        ResetDay(category="INTEGRATION", practice="Write a letter to your future self. What do you want her to know?"),
    ],
    Archetype.RADIANT: [
        ResetDay(category="BODY", practice="Honour your body with its preferred form of movement. Let it guide you."),
        ResetDay(category="EMOTIONS", practice="Practice transmuting any low emotion into creative energy within 5 minutes."),
        ResetDay(category="MIND", practice="Mentor someone today. Share one insight that shifted everything for you."),
        ResetDay(category="SPIRIT", practice="Deep meditation: 20 minutes of complete presence and connection."),
        ResetDay(category="SUPPORT", practice="Create a new supportive ritual with someone you love."),
        ResetDay(category="EXPANSION", practice="Dream bigger. What would you do if you knew you couldn't fail?"),
        ResetDay(category="INTEGRATION", practice="Anchor your new identity. Who are you becoming? Live from that place."),
    ],
}

def _check_content_coverage(tables: Mapping[str, Mapping[Archetype, object]]) -> None:
    for table_name, table in tables.items():
        missing = [a.value for a in Archetype if a not in table]
        if missing:
            raise ContentConfigurationError(f"{table_name} is missing archetypes: {missing}")
    for archetype, plan in RESET_PLANS.items():
        if len(plan) != 7:
            raise ContentConfigurationError(f"Reset plan for '{archetype.value}' has {len(plan)} days, expected 7")

_check_content_coverage({
    "ARCHETYPE_PROFILES": ARCHETYPE_PROFILES,
    "CORE_PATTERNS": CORE_PATTERNS,
    "RESET_PLANS": RESET_PLANS,
})

# --- Status Language ---

STATUS_LEVELS = [
    (40, StatusLevel(label="Depleted", css_class="depleted")),
    (70, StatusLevel(label="Transitioning", css_class="transitioning")),
    (100, StatusLevel(label="Flowing", css_class="flowing")),
]

STATUS_MESSAGES = {
    "depleted": "YOUR SYSTEM IS CALLING FOR DEEP RESTORATION. GENTLE, CONSISTENT STEPS ARE THE MOST EFFECTIVE PATH FORWARD.",
    "transitioning": "YOUR SYSTEM IS IN A MEANINGFUL TRANSITION. STEADY, INTENTIONAL ADJUSTMENTS WILL CREATE LASTING POSITIVE CHANGE.",
    "flowing": "YOUR SYSTEM IS IN A STATE OF FLOW. CONTINUE NURTURING THESE PATTERNS TO SUSTAIN AND DEEPEN YOUR ALIGNMENT.",
}

# Display order of the radar chart and dimension bars
DIMENSION_DISPLAY_NAMES = {
    Dimension.BB: "Body",
    Dimension.EO: "Emotions",
    Dimension.RO: "Mind",
    Dimension.SP: "Spirit",
    Dimension.SS: "Support",
}

# --- Lookups ---

def resolve_archetype(key: Union[Archetype, str]) -> Archetype:
    """Maps a raw key to an Archetype, falling back to Awakening when unrecognized."""
    if isinstance(key, Archetype):
        return key
    try:
        return Archetype(key)
    except ValueError:
        logger.warning(f"Unknown archetype key '{key}', falling back to '{FALLBACK_ARCHETYPE.value}'")
        return FALLBACK_ARCHETYPE

def get_archetype_profile(key: Union[Archetype, str]) -> ArchetypeProfile:
    return ARCHETYPE_PROFILES[resolve_archetype(key)]

def get_core_pattern(key: Union[Archetype, str]) -> CorePattern:
    return CORE_PATTERNS[resolve_archetype(key)]

def get_reset_plan(key: Union[Archetype, str]) -> List[ResetDay]:
    return list(RESET_PLANS[resolve_archetype(key)])

def get_status_level(score: int) -> StatusLevel:
    for upper_bound, level in STATUS_LEVELS:
        if score <= upper_bound:
            return level
    return STATUS_LEVELS[-1][1]

def get_status_message(eas: int) -> str:
    return STATUS_MESSAGES[get_status_level(eas).css_class]

def get_over_giving_level(ogi: int) -> str:
    if ogi > 60:
        return "High"
    if ogi > 30:
        return "Moderate"
    return "Low"

# --- Dimension Ranking ---

def display_score(dimensions: DimensionScores, dimension: Dimension) -> int:
    """Score on the healthier-is-higher scale; EO and RO are inverted."""
    raw = dimensions.get(dimension)
    return 100 - raw if dimension in NEGATIVELY_KEYED_DIMENSIONS else raw

def radar_series(dimensions: DimensionScores) -> List[RankedDimension]:
    return [
        RankedDimension(key=dimension, name=name, score=display_score(dimensions, dimension))
        for dimension, name in DIMENSION_DISPLAY_NAMES.items()
    ]

def rank_dimensions(dimensions: DimensionScores) -> List[RankedDimension]:
    """Weakest first. Ties keep display order."""
    return sorted(radar_series(dimensions), key=lambda d: d.score)

def build_snapshot_tags(result: QuizResult) -> List[SnapshotTag]:
    bmh_status = get_status_level(result.indices.BMH)
    rci_status = get_status_level(result.indices.RCI)
    # OGI is negatively keyed: its status follows 100 - OGI
    ogi_status = get_status_level(100 - result.indices.OGI)
    return [
        SnapshotTag(label="Body–Mind", value=bmh_status.label, css_class=bmh_status.css_class),
        SnapshotTag(label="Receiving", value=rci_status.label, css_class=rci_status.css_class),
        SnapshotTag(label="Over-Giving", value=get_over_giving_level(result.indices.OGI), css_class=ogi_status.css_class),
    ]

# --- Report Assembly ---

def generate_report(result: QuizResult) -> EnergyReport:
    """
    Builds the personalised report for a scored quiz.

    Args:
        result: Output of the scoring engine.

    Returns:
        EnergyReport bundling the result with its status, archetype content,
        dimension ranking and 7-day reset plan.
    """
    ranked = rank_dimensions(result.dimensions)
    status = get_status_level(result.eas)

    logger.info(f"Generating report: eas={result.eas}, archetype={result.archetype_key.value}")
    return EnergyReport(
        result=result,
        status=status,
        status_message=get_status_message(result.eas),
        profile=get_archetype_profile(result.archetype_key),
        radar=radar_series(result.dimensions),
        weakest=ranked[:2],
        strongest=ranked[-1],
        snapshot_tags=build_snapshot_tags(result),
        core_pattern=get_core_pattern(result.archetype_key),
        reset_plan=get_reset_plan(result.archetype_key),
    )
