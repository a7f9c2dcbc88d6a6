"""Static exercise instruction catalogue."""

EXERCISE_INSTRUCTIONS: dict[str, dict[str, list[str]]] = {
    "cardio": {
        "running": [
            "Start with a 5-minute warm-up walk",
            "Begin jogging at a comfortable pace",
            "Maintain steady breathing rhythm",
            "Keep your posture upright",
            "Land on the balls of your feet",
            "Cool down with a 5-minute walk",
            "Stretch your calves and hamstrings",
        ],
        "cycling": [
            "Adjust bike seat to hip height",
            "Start with easy pedaling for 5 minutes",
            "Maintain 80-100 RPM cadence",
            "Keep your core engaged",
            "Alternate between sitting and standing",
            "Cool down with easy pedaling",
            "Stretch your quads and hip flexors",
        ],
        "swimming": [
            "Start with 5 minutes of easy swimming",
            "Focus on proper breathing technique",
            "Keep your body horizontal in water",
            "Use long, smooth strokes",
            "Alternate between different strokes",
            "Cool down with easy backstroke",
            "Stretch shoulders and back",
        ],
    },
    "strength": {
        "push-ups": [
            "Start in plank position",
            "Place hands slightly wider than shoulders",
            "Keep your body in straight line",
            "Lower chest to ground",
            "Push back up to starting position",
            "Keep core tight throughout",
            "Breathe in down, breathe out up",
        ],
        "squats": [
            "Stand with feet shoulder-width apart",
            "Keep your chest up and core tight",
            "Lower by pushing hips back",
            "Go down until thighs are parallel",
            "Push through heels to stand up",
            "Keep knees aligned with toes",
            "Squeeze glutes at the top",
        ],
        "deadlifts": [
            "Stand with feet hip-width apart",
            "Grip bar with hands outside legs",
            "Keep back straight and chest up",
            "Lift by extending hips and knees",
            "Keep bar close to your body",
            "Stand tall at the top",
            "Lower with control",
        ],
    },
    "flexibility": {
        "yoga": [
            "Start with deep breathing exercises",
            "Begin with gentle warm-up poses",
            "Hold each pose for 5-8 breaths",
            "Focus on proper alignment",
            "Listen to your body",
            "Transition slowly between poses",
            "End with relaxation pose",
        ],
        "stretching": [
            "Warm up with light movement",
            "Hold each stretch for 30 seconds",
            "Breathe deeply and relax",
            "Never force a stretch",
            "Feel gentle tension, not pain",
            "Stretch both sides equally",
            "Cool down gradually",
        ],
    },
    "sports": {
        "basketball": [
            "Warm up with light dribbling",
            "Practice shooting form",
            "Focus on footwork",
            "Play at game intensity",
            "Stay hydrated throughout",
            "Cool down with free throws",
            "Stretch arms and legs",
        ],
        "tennis": [
            "Start with gentle rallying",
            "Work on different strokes",
            "Focus on footwork and positioning",
            "Practice serving technique",
            "Play points or games",
            "Cool down with easy hitting",
            "Stretch shoulders and wrists",
        ],
    },
}

GENERIC_STEPS = [
    "Start with a proper warm-up",
    "Focus on correct form and technique",
    "Maintain steady breathing throughout",
    "Listen to your body and adjust intensity",
    "Stay hydrated during the workout",
    "Cool down with light activity",
    "Finish with appropriate stretching",
]


def exercise_steps(workout_type: str, name: str) -> list[str]:
    """Return instructions for a workout, falling back to generic steps."""
    catalogue = EXERCISE_INSTRUCTIONS.get(workout_type.lower(), {})
    normalized = name.lower()
    for exercise, steps in catalogue.items():
        if normalized in exercise or exercise in normalized:
            return list(steps)
    return list(GENERIC_STEPS)
