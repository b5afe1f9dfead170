import math


class MathTools:
    """Provides the arithmetic behind the dashboard figures."""

    MINUTES_PER_HOUR: int = 60
    CM_PER_M: float = 100.0

    @staticmethod
    def parse_positive_real(value: object, name: str) -> float:
        """Return ``value`` as a finite positive float or raise ``ValueError``."""
        if isinstance(value, bool):
            raise ValueError(f"{name} must be a positive number")
        try:
            number = float(str(value).strip()) if isinstance(value, str) else float(value)
        except (TypeError, ValueError, OverflowError):
            raise ValueError(f"{name} must be a positive number")
        if not math.isfinite(number) or number <= 0:
            raise ValueError(f"{name} must be a positive number")
        return number

    @staticmethod
    def parse_int(value: object, name: str) -> int:
        """Return ``value`` as an integer, accepting integral strings."""
        if isinstance(value, bool):
            raise ValueError(f"{name} must be a whole number")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            try:
                return int(value.strip())
            except ValueError:
                raise ValueError(f"{name} must be a whole number")
        raise ValueError(f"{name} must be a whole number")

    @classmethod
    def parse_non_negative_int(cls, value: object, name: str) -> int:
        number = cls.parse_int(value, name)
        if number < 0:
            raise ValueError(f"{name} must be non-negative")
        return number

    @classmethod
    def bmi(cls, weight_kg: float, height_cm: float) -> float:
        """Return body mass index for weight in kg and height in cm."""
        if weight_kg <= 0 or height_cm <= 0:
            raise ValueError("weight and height must be positive")
        height_m = height_cm / cls.CM_PER_M
        try:
            denominator = height_m**2
        except OverflowError:
            raise ValueError("height is out of range")
        if denominator == 0:
            raise ValueError("height is out of range")
        result = weight_kg / denominator
        if not math.isfinite(result):
            raise ValueError("BMI is out of range")
        return result

    @classmethod
    def whole_hours(cls, minutes: int) -> int:
        """Return ``minutes`` truncated to full hours."""
        if minutes < 0:
            raise ValueError("minutes must be non-negative")
        return minutes // cls.MINUTES_PER_HOUR

    @staticmethod
    def net_calories(consumed: int, burned: int) -> int:
        if consumed < 0 or burned < 0:
            raise ValueError("calories must be non-negative")
        return consumed - burned
