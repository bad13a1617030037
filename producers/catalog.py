"""Fixed catalog of cities observed by the pipeline."""

from producers.schemas import City

SUPPORTED_CITIES: tuple[City, ...] = (
    City(name="London", latitude=51.5074, longitude=-0.1278),
    City(name="New York", latitude=40.7128, longitude=-74.0060),
    City(name="Tokyo", latitude=35.6762, longitude=139.6503),
    City(name="Paris", latitude=48.8566, longitude=2.3522),
    City(name="Sydney", latitude=-33.8688, longitude=151.2093),
)


def get_supported_cities() -> list[City]:
    return list(SUPPORTED_CITIES)
