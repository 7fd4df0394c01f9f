"""Display vocabulary for moods and energy levels."""
from typing import Dict

from .entities import EnergyKind, MoodKind

MOOD_EMOJIS: Dict[MoodKind, str] = {
    MoodKind.HAPPY: "😊",
    MoodKind.CALM: "😌",
    MoodKind.TIRED: "😴",
    MoodKind.STRESSED: "😰",
    MoodKind.SAD: "😞",
}

MOOD_DESCRIPTIONS: Dict[MoodKind, str] = {
    MoodKind.HAPPY: "You feel joyful, content, and optimistic about your day.",
    MoodKind.CALM: "You feel relaxed, at peace, and mentally clear.",
    MoodKind.TIRED: "You feel physically or mentally fatigued and need rest.",
    MoodKind.STRESSED: "You feel overwhelmed, tense, or anxious about demands.",
    MoodKind.SAD: "You feel down, low in spirits, or emotionally heavy.",
}

ENERGY_DESCRIPTIONS: Dict[EnergyKind, str] = {
    EnergyKind.LOW: "You have minimal energy, feeling drained or exhausted.",
    EnergyKind.MEDIUM: "You have moderate energy, able to function but not at peak.",
    EnergyKind.HIGH: "You have abundant energy, feeling vibrant and ready to go.",
}

NEUTRAL_EMOJI = "😐"


def emoji_for(mood: str) -> str:
    """Emoji for a mood value; unknown moods get the neutral face."""
    try:
        return MOOD_EMOJIS[MoodKind(mood)]
    except ValueError:
        return NEUTRAL_EMOJI
