"""Streak popup copy"""
from typing import Tuple

STREAK_HEADERS: Tuple[str, ...] = (
    "Keep the momentum going! 🔥",
    "You're unstoppable! 💪",
    "Consistency is key! ⭐",
    "Building greatness, one day at a time! 🌟",
    "You're on fire! 🔥",
    "Every day counts! 📈",
    "Small steps, big results! 🚀",
    "You're crushing it! 💯",
    "The streak continues! ⚡",
    "Excellence is a habit! ✨",
)

# {count} is replaced with the streak length
STREAK_SUB_HEADERS: Tuple[str, ...] = (
    "Another streak in the books! Let's continue... the {count} day streak",
    "You're on fire! Welcome, {count} day streak!",
    "Incredible! {count} days of focus and counting!",
    "Amazing work! Your {count} day streak is inspiring!",
    "Unstoppable! {count} days strong and growing!",
    "Phenomenal! Keep the {count} day streak alive!",
    "Outstanding! {count} days of dedication!",
    "Remarkable! Your {count} day streak shows real commitment!",
    "Exceptional! {count} days and still going strong!",
    "Incredible! The {count} day streak continues!",
)
