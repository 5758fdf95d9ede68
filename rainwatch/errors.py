# rainwatch/errors.py


class RainwatchError(Exception):
    """Base for failures that end the run with a non-zero exit code."""
    exit_code = 1


class WeatherAPIError(RainwatchError):
    def __init__(self, message: str = "failed to query Open-Meteo API"):
        super().__init__(message)


class WeatherDataError(RainwatchError):
    def __init__(self, message: str = "missing expected fields in API response"):
        super().__init__(message)
