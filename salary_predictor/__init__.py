"""Japan/USA salary predictor: reference dataset lookup and prediction engine."""

__version__ = "0.1.0"
