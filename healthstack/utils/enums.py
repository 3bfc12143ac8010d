from enum import Enum

class MealType(str, Enum):
    BREAKFAST = "BREAKFAST"
    LUNCH = "LUNCH"
    DINNER = "DINNER"
    SNACK = "SNACK"

class ExerciseType(str, Enum):
    CARDIO = "CARDIO"
    STRENGTH = "STRENGTH"
    FLEXIBILITY = "FLEXIBILITY"
    SPORTS = "SPORTS"
    OTHER = "OTHER"

class Intensity(str, Enum):
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"

class DietType(str, Enum):
    KETO = "KETO"
    PALEO = "PALEO"
    VEGAN = "VEGAN"
    VEGETARIAN = "VEGETARIAN"
    MEDITERRANEAN = "MEDITERRANEAN"
    BALANCED = "BALANCED"
