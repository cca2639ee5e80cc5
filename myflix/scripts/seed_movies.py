"""
Movie seeding script
--------------------

Purpose:
- Insert a few sample movies so the catalog routes have data to return.
- Skips titles that already exist, so running it twice is harmless.

How to use:
1) Ensure env vars: CONNECTION_URI (or MONGO_URI), DB_NAME (optional)
2) Run:
   python -m myflix.scripts.seed_movies
"""
import logging
from typing import List

from myflix.core.logging_config import setup_logging
from myflix.di.container import get_container
from myflix.domain.models.movie import Director, Genre, Movie
from myflix.domain.repositories.movie_repository import MovieRepository
from myflix.utils.ids import new_id

logger = logging.getLogger(__name__)


def sample_movies() -> List[Movie]:
    thriller = Genre(
        name="Thriller",
        description="Thriller film, also known as suspense film, evokes excitement and suspense in the audience.",
    )
    animated = Genre(
        name="Animated",
        description="Animation is a method in which figures are manipulated to appear as moving images.",
    )
    return [
        Movie(
            id=new_id(),
            title="Silence of the Lambs",
            description="A young FBI cadet must receive the help of an incarcerated and manipulative "
                        "cannibal killer to help catch another serial killer.",
            genre=thriller,
            director=Director(name="Jonathan Demme", bio="Robert Jonathan Demme was an American director, producer and screenwriter."),
            image_url="silenceofthelambs.png",
            release="1991",
            featured=True,
            actors=["Jodie Foster", "Anthony Hopkins"],
        ),
        Movie(
            id=new_id(),
            title="The Lion King",
            description="Lion prince Simba flees his kingdom after the murder of his father.",
            genre=animated,
            director=Director(name="Roger Allers", bio="Roger Allers is an American film director and screenwriter."),
            image_url="thelionking.png",
            release="1994",
            featured=False,
            actors=["Matthew Broderick", "James Earl Jones"],
        ),
        Movie(
            id=new_id(),
            title="Shutter Island",
            description="A U.S. Marshal investigates the disappearance of a murderer who escaped from a hospital for the criminally insane.",
            genre=thriller,
            director=Director(name="Martin Scorsese", bio="Martin Charles Scorsese is an American film director and producer."),
            image_url="shutterisland.png",
            release="2010",
            featured=False,
            actors=["Leonardo DiCaprio", "Mark Ruffalo"],
        ),
    ]


def seed(repository: MovieRepository) -> int:
    """Insert the sample movies that are not present yet. Returns how many were inserted."""
    inserted = 0
    for movie in sample_movies():
        if repository.find_by_title(movie.title):
            logger.info(f"Skipping '{movie.title}', already present")
            continue
        repository.create(movie)
        inserted += 1
        logger.info(f"Inserted '{movie.title}' ({movie.id})")
    return inserted


def main() -> None:
    setup_logging()
    count = seed(get_container().get(MovieRepository))
    logger.info(f"Seeded {count} movies")


if __name__ == "__main__":
    main()
