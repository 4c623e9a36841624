"""Building blocks for tile-based painting: dab masks, operation queues, symmetry and a surface interface."""

__version__ = "2.0.0b0"