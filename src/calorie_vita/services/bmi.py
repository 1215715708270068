"""Body mass index calculation."""

from calorie_vita.domain.errors import InvalidInputError
from calorie_vita.domain.health import BmiCategory, BmiResult, Severity
from calorie_vita.domain.models import ProfileMetrics

UNDERWEIGHT_BELOW = 18.5
NORMAL_BELOW = 25.0
OVERWEIGHT_BELOW = 30.0

_SEVERITY = {
    BmiCategory.UNDERWEIGHT: Severity.CAUTION,
    BmiCategory.NORMAL: Severity.OK,
    BmiCategory.OVERWEIGHT: Severity.WARNING,
    BmiCategory.OBESE: Severity.ALERT,
}

_COLORS = {
    BmiCategory.UNDERWEIGHT: "blue",
    BmiCategory.NORMAL: "green",
    BmiCategory.OVERWEIGHT: "orange",
    BmiCategory.OBESE: "red",
}

_RECOMMENDATIONS = {
    BmiCategory.UNDERWEIGHT: (
        "Consider increasing your calorie intake with healthy foods and "
        "strength training to build muscle mass."
    ),
    BmiCategory.NORMAL: (
        "Great job! Maintain your current healthy lifestyle with balanced "
        "nutrition and regular exercise."
    ),
    BmiCategory.OVERWEIGHT: (
        "Focus on creating a moderate calorie deficit through healthy eating "
        "and increased physical activity."
    ),
    BmiCategory.OBESE: (
        "Consider consulting with a healthcare professional for a "
        "personalized weight management plan."
    ),
}


def compute_bmi(weight_kg: float, height_m: float) -> BmiResult:
    """Return BMI, category and severity for a weight and height."""
    if height_m <= 0:
        raise InvalidInputError(f"height must be positive, got {height_m}")
    if weight_kg <= 0:
        raise InvalidInputError(f"weight must be positive, got {weight_kg}")
    bmi = weight_kg / (height_m * height_m)
    category = bmi_category(bmi)
    return BmiResult(
        bmi=bmi,
        category=category,
        severity=_SEVERITY[category],
        color=_COLORS[category],
    )


def bmi_category(bmi: float) -> BmiCategory:
    """Map a BMI value to its band. Boundaries belong to the higher band."""
    if bmi < UNDERWEIGHT_BELOW:
        return BmiCategory.UNDERWEIGHT
    if bmi < NORMAL_BELOW:
        return BmiCategory.NORMAL
    if bmi < OVERWEIGHT_BELOW:
        return BmiCategory.OVERWEIGHT
    return BmiCategory.OBESE


def bmi_recommendation(
    category: BmiCategory, profile: ProfileMetrics | None = None
) -> str:
    """Return recommendation text for a BMI category.

    When a profile is given the text mentions the profile's gender and age,
    otherwise it nudges the user to complete their profile.
    """
    base = _RECOMMENDATIONS[category]
    if profile is None:
        return (
            f"{base} Update your profile in settings for more personalized "
            "recommendations."
        )
    gender = profile.gender.value.capitalize()
    return (
        f"{base} Based on your profile ({gender}, {profile.age_years} years old), "
        "this recommendation is personalized for you."
    )
