"""Reflection, refraction and Fresnel reflectance."""

import math

from softrender.raymath import Vec3, clamp, dot


def reflect(incident, normal):
    """Mirror ``incident`` about ``normal``."""
    return incident - 2 * dot(incident, normal) * normal


def refract(incident, normal, ior):
    """Refraction direction by Snell's law; zero on total internal reflection."""
    cosi = clamp(-1, 1, dot(incident, normal))
    etai, etat = 1.0, ior
    n = normal
    if cosi < 0:
        cosi = -cosi
    else:
        etai, etat = etat, etai
        n = -normal
    eta = etai / etat
    k = 1 - eta * eta * (1 - cosi * cosi)
    if k < 0:
        return Vec3(0.0, 0.0, 0.0)
    return eta * incident + (eta * cosi - math.sqrt(k)) * n


def fresnel(incident, normal, ior):
    """Fraction of light reflected at the surface (1 on total internal reflection)."""
    cosi = clamp(-1, 1, dot(incident, normal))
    etai, etat = 1.0, ior
    if cosi > 0:
        etai, etat = etat, etai
    sint = etai / etat * math.sqrt(max(0.0, 1 - cosi * cosi))
    if sint >= 1:
        return 1.0
    cost = math.sqrt(max(0.0, 1 - sint * sint))
    cosi = abs(cosi)
    rs = ((etat * cosi) - (etai * cost)) / ((etat * cosi) + (etai * cost))
    rp = ((etai * cosi) - (etat * cost)) / ((etai * cosi) + (etat * cost))
    return (rs * rs + rp * rp) / 2