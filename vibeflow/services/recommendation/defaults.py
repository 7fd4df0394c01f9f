"""Built-in catalog content."""
from __future__ import annotations

from typing import Any, Dict, List

from vibeflow.domain.recommendation.entities import Recommendation

# (mood, energy, category, title, description)
_DEFAULT_CATALOG = [
    ("happy", "low", "food", "Enjoy yogurt with honey",
     "A gentle sweet treat that provides energy without being overwhelming."),
    ("happy", "low", "food", "Sip herbal tea",
     "A calming warm beverage to maintain your positive mood."),
    ("happy", "low", "food", "Eat a banana",
     "Natural energy boost that works gently with your current energy level."),
    ("happy", "low", "activity", "Gentle stretching session",
     "Keep your happy mood while respecting your low energy with gentle movement."),
    ("happy", "low", "activity", "Try foam rolling",
     "Self-massage that feels good and requires minimal energy."),
    ("happy", "low", "activity", "Take a slow-paced walk",
     "Enjoy your good mood with a leisurely stroll that won't tax your energy."),
    ("happy", "low", "mindfulness", "Music appreciation moment",
     "Listen to your favorite songs mindfully while resting."),
    ("happy", "low", "mindfulness", "Practice mindful smiling",
     "Enhance your happy mood by consciously smiling and feeling the sensation."),
    ("happy", "medium", "food", "Prepare a smoothie bowl",
     "A nutritious treat that matches your upbeat mood and moderate energy."),
    ("happy", "medium", "food", "Snack on mixed nuts",
     "Sustained energy to complement your positive mood."),
    ("happy", "medium", "food", "Enjoy dark chocolate",
     "A mood-boosting treat that provides antioxidants and pleasure."),
    ("happy", "medium", "activity", "Take a brisk walk",
     "Match your happy mood with some moderately energetic movement."),
    ("happy", "medium", "activity", "Do a dance workout",
     "Express your happiness through movement that matches your energy level."),
    ("happy", "medium", "mindfulness", "Write a gratitude list",
     "Enhance your happy mood by noting what you're thankful for."),
    ("happy", "high", "food", "Prepare a fruit salad",
     "Fresh, vibrant foods to match your high energy and happy mood."),
    ("happy", "high", "food", "Enjoy hummus with veggies",
     "Nutritious snack to sustain your energy and good mood."),
    ("happy", "high", "activity", "Go for a jog",
     "Use your high energy and good mood for an invigorating run."),
    ("happy", "high", "activity", "Hop on a bicycle",
     "Channel your happiness and energy into an enjoyable ride."),
    ("happy", "high", "activity", "Try a HIIT workout",
     "Make the most of your high energy with an intense, mood-boosting exercise."),
    ("happy", "high", "mindfulness", "Take a mindful nature walk",
     "Be fully present in nature while enjoying your positive state."),
    ("calm", "low", "food", "Have a bowl of oatmeal",
     "Comforting food that sustains your calm state without requiring much energy."),
    ("calm", "low", "food", "Sip chamomile tea",
     "A soothing beverage that complements your calm, low-energy state."),
    ("calm", "low", "activity", "Try light stretching",
     "Gentle movement that maintains your calm state while respecting low energy."),
    ("calm", "low", "activity", "Take a soft walk",
     "A gentle stroll to maintain your peaceful mood without exertion."),
    ("calm", "low", "mindfulness", "Practice mindful tea drinking",
     "Focus fully on the experience of preparing and drinking tea."),
    ("calm", "medium", "food", "Make avocado toast",
     "Nutritious food that supports your balanced mood and energy."),
    ("calm", "medium", "activity", "Take a casual walk",
     "Moderate activity that maintains your calm state."),
    ("calm", "medium", "activity", "Do a stretching flow",
     "Fluid movement that complements your calm, moderately energetic state."),
    ("calm", "medium", "mindfulness", "Try a 5 senses check-in",
     "Notice what you can see, hear, smell, taste and feel right now."),
    ("calm", "high", "food", "Drink green tea",
     "Maintains your calm focus while supporting your high energy."),
    ("calm", "high", "activity", "Take a long walk",
     "Use your energy while maintaining your calm state with sustained activity."),
    ("calm", "high", "mindfulness", "Try forest bathing",
     "Immerse yourself in nature to channel your energy into peaceful awareness."),
    ("tired", "low", "food", "Have a bowl of soup",
     "Easy-to-digest nourishment when you're tired with low energy."),
    ("tired", "low", "activity", "Take a slow-paced walk",
     "Gentle movement that might help with fatigue without overexertion."),
    ("tired", "low", "mindfulness", "Practice 4-7-8 breathing",
     "A breathing technique that can help both calm and energize."),
    ("tired", "medium", "food", "Eat Greek yogurt",
     "Protein-rich food to help sustain your moderate energy despite tiredness."),
    ("tired", "medium", "activity", "Do light cardio",
     "Movement that may help shake off tiredness without exhausting you."),
    ("tired", "medium", "mindfulness", "Try progressive muscle relaxation",
     "Tension and release exercise to address tiredness in the body."),
    ("tired", "high", "food", "Make a protein shake",
     "Quick nutrition to help focus your energy when feeling tired."),
    ("tired", "high", "activity", "Try jump rope",
     "Channel your surprising energy into an activity that might help reset tiredness."),
    ("tired", "high", "mindfulness", "Practice energizing affirmations",
     "Mental exercise to align your mindset with your available energy."),
    ("stressed", "low", "food", "Have warm milk",
     "Soothing beverage that may help reduce stress while requiring little energy."),
    ("stressed", "low", "activity", "Practice deep breathing",
     "Simple technique to reduce stress that works even with low energy."),
    ("stressed", "low", "mindfulness", "Do a body scan meditation",
     "Mindfulness practice to release tension without requiring much energy."),
    ("stressed", "medium", "food", "Have a piece of dark chocolate",
     "A small treat that may help reduce stress hormones."),
    ("stressed", "medium", "activity", "Take a mindful walk",
     "Movement combined with awareness to help process stress."),
    ("stressed", "medium", "mindfulness", "Try guided meditation",
     "Let someone else lead you through stress reduction when you have some energy."),
    ("stressed", "high", "food", "Eat grilled salmon",
     "Omega-3s may help reduce stress while providing sustaining nutrition."),
    ("stressed", "high", "activity", "Do a HIIT workout",
     "Channel stress and high energy into intense exercise for relief."),
    ("stressed", "high", "mindfulness", "Practice cooldown meditation",
     "Guided winding down to help process stress when energy is high."),
    ("sad", "low", "food", "Have lentil soup",
     "Comforting, nourishing food that's easy to prepare when feeling down."),
    ("sad", "low", "activity", "Take a slow walk",
     "Gentle activity that may help with mood without requiring much energy."),
    ("sad", "low", "mindfulness", "Practice self-compassion meditation",
     "Kindness toward yourself during difficult emotions."),
    ("sad", "medium", "food", "Try baked tofu",
     "Protein-rich food that may help stabilize mood."),
    ("sad", "medium", "activity", "Do a home workout",
     "Movement that can help release mood-boosting endorphins."),
    ("sad", "medium", "mindfulness", "Write in a gratitude journal",
     "Shifting focus to positive aspects even during sadness."),
    ("sad", "high", "food", "Eat sweet potatoes",
     "Complex carbs that may help support stable mood with high energy."),
    ("sad", "high", "activity", "Do cardio bursts",
     "Channel energy into short, intense movement that may improve mood."),
    ("sad", "high", "mindfulness", "Practice emotional journaling",
     "Process feelings through writing when you have energy to engage with them."),
]


def default_catalog_rows() -> List[Dict[str, Any]]:
    """Seed rows keyed by store column names."""
    return [
        {
            "title": title,
            "description": description,
            "category": category,
            "mood_types": [mood],
            "energy_levels": [energy],
        }
        for mood, energy, category, title, description in _DEFAULT_CATALOG
    ]


def starter_recommendations() -> List[Recommendation]:
    """Last-resort list served when the store yields nothing."""
    return [
        Recommendation(
            id="default-1",
            title="Take a short walk",
            description="Even a 10-minute walk can boost your mood and energy levels.",
            category="activity",
            mood_types=("tired", "stressed", "sad"),
            energy_levels=("low", "medium"),
        ),
        Recommendation(
            id="default-2",
            title="Drink water",
            description="Staying hydrated is essential for maintaining energy levels.",
            category="food",
            mood_types=("tired",),
            energy_levels=("low", "medium", "high"),
        ),
        Recommendation(
            id="default-3",
            title="Deep breathing exercise",
            description="Take 5 deep breaths, inhaling for 4 counts and exhaling for 6.",
            category="mindfulness",
            mood_types=("stressed", "sad"),
            energy_levels=("low", "medium", "high"),
        ),
    ]
