# materials/presets.py
from raytrace.core.vector import Color
from raytrace.materials.dielectric import Dielectric
from raytrace.materials.lambertian import Lambertian
from raytrace.materials.metal import Metal


class MetalPresets:
    """Predefined metal materials with realistic properties."""

    @staticmethod
    def gold() -> Metal:
        return Metal(Color(1.0, 0.78, 0.34), fuzz=0.1)

    @staticmethod
    def silver() -> Metal:
        return Metal(Color(0.95, 0.93, 0.88), fuzz=0.05)

    @staticmethod
    def copper() -> Metal:
        return Metal(Color(0.95, 0.64, 0.54), fuzz=0.1)

    @staticmethod
    def mirror() -> Metal:
        return Metal(Color(0.7, 0.6, 0.5), fuzz=0.0)

    @staticmethod
    def brushed_metal() -> Metal:
        return Metal(Color(0.8, 0.8, 0.8), fuzz=0.3)


class DielectricPresets:
    """Predefined dielectric materials with realistic refractive indices."""

    @staticmethod
    def glass() -> Dielectric:
        return Dielectric(1.5)

    @staticmethod
    def water() -> Dielectric:
        return Dielectric(1.33)

    @staticmethod
    def diamond() -> Dielectric:
        return Dielectric(2.42)

    @staticmethod
    def ice() -> Dielectric:
        return Dielectric(1.31)


class ColorPresets:
    """Common color presets for materials."""

    RED = Color(0.7, 0.3, 0.3)
    BROWN = Color(0.4, 0.2, 0.1)
    GRAY = Color(0.5, 0.5, 0.5)

    @staticmethod
    def matte(color: Color) -> Lambertian:
        """Create a matte material with the given color."""
        return Lambertian(color)
