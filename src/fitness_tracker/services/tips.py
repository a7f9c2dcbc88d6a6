"""Motivational fitness tips."""

import random
from dataclasses import dataclass, field

FITNESS_TIPS = [
    "Start your day with a 10-minute walk to boost energy and mood!",
    "Stay hydrated - drink water before, during, and after workouts.",
    "Progress is progress, no matter how small. Celebrate every victory!",
    "Mix up your workouts to keep things interesting and challenge different "
    "muscles.",
    "Listen to your body - rest days are just as important as workout days.",
    "Set realistic goals and track your progress to stay motivated.",
    "Find a workout buddy or join a fitness community for accountability.",
    "Focus on how exercise makes you feel, not just how you look.",
    "Consistency beats perfection - aim for progress, not perfection.",
    "Remember: every expert was once a beginner. Keep going!",
    "Strength doesn't come from what you can do, it comes from overcoming things "
    "you thought you couldn't.",
    "Your body can do it. It's your mind you need to convince.",
    "The only bad workout is the one that didn't happen.",
    "Fitness is not about being better than someone else. It's about being better "
    "than you used to be.",
    "Success is the sum of small efforts repeated day in and day out.",
]


@dataclass
class TipService:
    """Serves a random selection of tips."""

    tips: list[str] = field(default_factory=lambda: list(FITNESS_TIPS))
    rng: random.Random = field(default_factory=random.Random)

    def pick(self, count: int = 5) -> list[str]:
        """Return up to ``count`` distinct tips in random order."""
        return self.rng.sample(self.tips, k=min(count, len(self.tips)))
