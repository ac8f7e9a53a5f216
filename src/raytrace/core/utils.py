# core/utils.py
import math

from raytrace.core.vector import Vector3


def reflect(v: Vector3, n: Vector3) -> Vector3:
    """
    Reflects vector v about the normal n.
    n must be unit length; the result has the same length as v.
    """
    return v - n * (2 * v.dot(n))


def refract(uv: Vector3, n: Vector3, etai_over_etat: float) -> Vector3:
    """
    Refracts the unit vector uv through a surface with unit normal n.

    The caller is responsible for ruling out total internal reflection;
    abs() keeps the parallel term real when rounding pushes it negative.
    """
    cos_theta = min(-uv.dot(n), 1.0)
    r_out_perp = (uv + n * cos_theta) * etai_over_etat
    r_out_parallel = n * -math.sqrt(abs(1.0 - r_out_perp.length_squared()))
    return r_out_perp + r_out_parallel


def reflectance(cosine: float, ref_ratio: float) -> float:
    """
    Schlick's approximation of the Fresnel reflectance.
    """
    r0 = (1.0 - ref_ratio) / (1.0 + ref_ratio)
    r0 = r0 * r0
    return r0 + (1.0 - r0) * math.pow(1.0 - cosine, 5)
