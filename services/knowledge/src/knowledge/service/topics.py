"""Coverage areas of the food knowledge base."""

FOOD_TOPICS = (
    "Recipes & Cooking",
    "Nutrition & Health",
    "World Cuisines",
    "Ingredients & Substitutions",
    "Dietary Restrictions",
    "Food Safety",
    "Kitchen Tips",
    "Meal Planning",
    "Baking & Pastry",
    "Food Science",
)


def list_topics() -> list[str]:
    return list(FOOD_TOPICS)
