from .matches import ArgMatches

__all__ = ["ArgMatches"]
