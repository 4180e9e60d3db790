"""livingthings: typed API boundary for the LivingThing domain."""

__version__ = "0.1.0"
