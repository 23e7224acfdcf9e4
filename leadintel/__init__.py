"""LeadIntel — lead intelligence and prioritization engine."""

__version__ = "0.1.0"
