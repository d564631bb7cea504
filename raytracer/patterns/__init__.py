from raytracer.patterns.checker import Checker
from raytracer.patterns.gradient import Gradient
from raytracer.patterns.nested import Nested
from raytracer.patterns.pattern import Pattern, PatternKind
from raytracer.patterns.perlin import Perlin
from raytracer.patterns.radial_gradient import RadialGradient
from raytracer.patterns.ring import Ring
from raytracer.patterns.solid import Solid
from raytracer.patterns.stripe import Stripe

__all__ = [
    "Checker",
    "Gradient",
    "Nested",
    "Pattern",
    "PatternKind",
    "Perlin",
    "RadialGradient",
    "Ring",
    "Solid",
    "Stripe",
]
