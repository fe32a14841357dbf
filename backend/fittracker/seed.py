"""Demo account and sample records loaded at startup."""
import logging

from fittracker.repositories import DataStore
from fittracker.services.auth_service import AuthService
from fittracker.services.nutrition import apply_food_totals

logger = logging.getLogger(__name__)

DEMO_EMAIL = "demo@fittracker.com"
DEMO_PASSWORD = "demo123"

DEMO_PROFILE = {
    "email": DEMO_EMAIL,
    "name": "John Doe",
    "age": 28,
    "height": 175,
    "weight": 70,
    "fitness_goal": "Build Muscle",
    "activity_level": "Moderate",
    "created_at": "2024-01-01T00:00:00+00:00",
}

DEMO_WORKOUTS = [
    {
        "name": "Upper Body Strength",
        "date": "2024-01-15",
        "duration": 45,
        "exercises": [
            {"name": "Bench Press", "sets": 3, "reps": 10, "weight": 80, "distance": None},
            {"name": "Pull-ups", "sets": 3, "reps": 8, "weight": 0, "distance": None},
            {"name": "Shoulder Press", "sets": 3, "reps": 12, "weight": 25, "distance": None},
        ],
        "notes": "Great workout, felt strong today!",
        "category": "Strength",
        "calories_burned": 320,
    },
    {
        "name": "Cardio Run",
        "date": "2024-01-14",
        "duration": 30,
        "exercises": [
            {"name": "Running", "sets": 1, "reps": 1, "weight": 0, "distance": 5},
        ],
        "notes": "Perfect weather for running",
        "category": "Cardio",
        "calories_burned": 450,
    },
]

DEMO_NUTRITION = [
    {
        "date": "2024-01-15",
        "meal": "Breakfast",
        "foods": [
            {"name": "Oatmeal", "quantity": 1, "unit": "cup", "calories": 150, "protein": 5, "carbs": 27, "fat": 3},
            {"name": "Banana", "quantity": 1, "unit": "piece", "calories": 105, "protein": 1, "carbs": 27, "fat": 0},
        ],
    },
    {
        "date": "2024-01-15",
        "meal": "Lunch",
        "foods": [
            {"name": "Chicken Breast", "quantity": 150, "unit": "g", "calories": 231, "protein": 43, "carbs": 0, "fat": 5},
            {"name": "Brown Rice", "quantity": 1, "unit": "cup", "calories": 216, "protein": 5, "carbs": 45, "fat": 2},
        ],
    },
]

DEMO_PROGRESS = [
    {"date": "2024-01-01", "weight": 72, "body_fat": 15, "muscle": 58},
    {"date": "2024-01-08", "weight": 71.5, "body_fat": 14.8, "muscle": 58.2},
    {"date": "2024-01-15", "weight": 71, "body_fat": 14.5, "muscle": 58.5},
]


async def seed_demo_data(store: DataStore, auth_service: AuthService) -> bool:
    """
    Load the demo account and its records.

    Returns False without writing anything when the demo account already exists.
    """
    if await store.users.first(email=DEMO_EMAIL):
        logger.info("Demo data already present")
        return False

    user = await store.users.create(
        {**DEMO_PROFILE, "password_hash": auth_service.hash_password(DEMO_PASSWORD)}
    )

    for workout in DEMO_WORKOUTS:
        await store.workouts.create({**workout, "user_id": user["id"]})

    for entry in DEMO_NUTRITION:
        await store.nutrition.create(apply_food_totals({**entry, "user_id": user["id"]}))

    for sample in DEMO_PROGRESS:
        await store.progress.create({**sample, "user_id": user["id"]})

    logger.info(f"Loaded demo data for {DEMO_EMAIL}")
    return True
