# test_movie_card.py
from models import Movie
from movie_card import PLACEHOLDER_POSTER, build_card, format_rating, poster_url, release_year


def test_card_without_poster_uses_placeholder():
    card = build_card(Movie(id=1, title="No Poster"))
    assert card.poster == PLACEHOLDER_POSTER


def test_card_without_release_date_shows_na_year():
    card = build_card(Movie(id=1, title="Undated", release_date=None))
    assert card.year == "N/A"


def test_full_card():
    movie = Movie.from_api({
        "id": 155,
        "title": "The Dark Knight",
        "poster_path": "/qJ2tW6WMUDux911r6m7haRef0WH.jpg",
        "vote_average": 8.516,
        "original_language": "en",
        "release_date": "2008-07-16",
    })
    card = build_card(movie)

    assert card.title == "The Dark Knight"
    assert card.poster == "https://image.tmdb.org/t/p/w500/qJ2tW6WMUDux911r6m7haRef0WH.jpg"
    assert card.rating == "8.5"
    assert card.language == "en"
    assert card.year == "2008"


def test_rating_missing_or_zero_is_na():
    assert format_rating(None) == "N/A"
    assert format_rating(0) == "N/A"
    assert format_rating(7) == "7.0"


def test_year_is_first_four_characters():
    assert release_year("1999-03-31") == "1999"
    assert release_year("") == "N/A"


def test_poster_path_without_leading_slash():
    assert poster_url("abc.jpg") == "https://image.tmdb.org/t/p/w500/abc.jpg"
