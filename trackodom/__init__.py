"""Vehicle odometry from GPS fixes and speed/steering readings, with lap sector timing."""

__version__ = "0.1.0"

__all__ = ["__version__"]