class WeightConverter:
    """Utility for converting body measurements to metric units."""

    KG_TO_LB = 2.20462
    CM_PER_INCH = 2.54

    @staticmethod
    def lb_to_kg(lb: float) -> float:
        return round(lb / WeightConverter.KG_TO_LB, 2)

    @staticmethod
    def inch_to_cm(inches: float) -> float:
        return round(inches * WeightConverter.CM_PER_INCH, 2)

    @classmethod
    def to_kg(cls, weight: float, unit: str) -> float:
        """Return ``weight`` in kilograms for a ``kg`` or ``lb`` unit."""
        if unit == "kg":
            return weight
        if unit == "lb":
            return cls.lb_to_kg(weight)
        raise ValueError(f"unsupported weight unit: {unit}")

    @classmethod
    def to_cm(cls, height: float, unit: str) -> float:
        """Return ``height`` in centimetres for a ``cm`` or ``in`` unit."""
        if unit == "cm":
            return height
        if unit == "in":
            return cls.inch_to_cm(height)
        raise ValueError(f"unsupported height unit: {unit}")
