from fastapi.testclient import TestClient
from sqlmodel import Session

from moviedb.models.movie import Movie

API = "/api/movies"


def test_read_movies_empty(client: TestClient) -> None:
    r = client.get(API)
    assert r.status_code == 200
    assert r.json() == []


def test_read_movies_returns_all(client: TestClient, movie_factory) -> None:
    movies = movie_factory.create_batch(3)

    r = client.get(API)

    assert r.status_code == 200
    assert sorted(m["id"] for m in r.json()) == sorted(m.id for m in movies)


def test_read_movies_is_repeatable(client: TestClient, movie_factory) -> None:
    movie_factory.create_batch(2)

    first = client.get(API).json()
    second = client.get(API).json()

    assert first == second


def test_read_movie(client: TestClient, movie_factory) -> None:
    movie: Movie = movie_factory()

    r = client.get(f"{API}/{movie.id}")

    assert r.status_code == 200
    data = r.json()
    assert data["id"] == movie.id
    assert data["title"] == movie.title
    assert data["director"] == movie.director
    assert data["year"] == movie.year
    assert data["rating"] == movie.rating
    assert data["poster"] == movie.poster
    assert data["movie_details"] == movie.movie_details


def test_read_movie_not_found(client: TestClient) -> None:
    r = client.get(f"{API}/4242")
    assert r.status_code == 404
    assert r.json() == {"message": "Movie with id 4242 not found!"}


def test_read_movie_non_integer_id(client: TestClient) -> None:
    r = client.get(f"{API}/abc")
    assert r.status_code == 422


def test_create_movie(client: TestClient, movie_payload, db_transaction: Session) -> None:
    payload = movie_payload()

    r = client.post(API, json=payload)

    assert r.status_code == 201
    data = r.json()
    assert isinstance(data["id"], int)
    for field, value in payload.items():
        assert data[field] == value
    assert db_transaction.get(Movie, data["id"]) is not None


def test_create_movie_accepts_zero_rating(client: TestClient, movie_payload) -> None:
    r = client.post(API, json=movie_payload(rating=0))
    assert r.status_code == 201
    assert r.json()["rating"] == 0


def test_create_movie_serializes_details_object(client: TestClient, movie_payload) -> None:
    r = client.post(API, json=movie_payload(movie_details={"runtime": 142}))
    assert r.status_code == 201
    assert r.json()["movie_details"] == '{"runtime": 142}'


def test_create_movie_missing_fields(client: TestClient, movie_payload) -> None:
    payload = movie_payload()
    del payload["title"]
    payload["poster"] = ""

    r = client.post(API, json=payload)

    assert r.status_code == 400
    assert r.json() == {"error": "title required poster required "}


def test_create_movie_without_body(client: TestClient) -> None:
    r = client.post(API)

    assert r.status_code == 400
    error = r.json()["error"]
    for field in ("title", "director", "year", "rating", "poster", "movie_details"):
        assert f"{field} required" in error


def test_create_movie_invalid_type(client: TestClient, movie_payload) -> None:
    r = client.post(API, json=movie_payload(year="next year"))
    assert r.status_code == 400
    assert r.json() == {"error": "year invalid "}


def test_update_movie(client: TestClient, movie_factory, movie_payload) -> None:
    movie: Movie = movie_factory()
    payload = movie_payload(movie_details="Director's cut")

    r = client.put(f"{API}/{movie.id}", json=payload)

    assert r.status_code == 200
    data = r.json()
    assert data["id"] == movie.id
    assert data["movie_details"] == "Director's cut"
    assert data["title"] == payload["title"]


def test_update_movie_overwrites_omitted_fields(client: TestClient, movie_factory) -> None:
    movie: Movie = movie_factory()

    r = client.put(f"{API}/{movie.id}", json={"title": "Renamed"})

    assert r.status_code == 200
    data = r.json()
    assert data["title"] == "Renamed"
    assert data["director"] is None
    assert data["movie_details"] is None


def test_update_movie_not_found(client: TestClient, movie_payload) -> None:
    r = client.put(f"{API}/4242", json=movie_payload())
    assert r.status_code == 404
    assert r.json() == {"message": "Movie with id 4242 not found!"}


def test_delete_movie_twice(client: TestClient, movie_factory) -> None:
    movie: Movie = movie_factory()
    movie_id = movie.id
    title = movie.title

    first = client.delete(f"{API}/{movie_id}")
    second = client.delete(f"{API}/{movie_id}")

    assert first.status_code == 200
    assert first.json()["id"] == movie_id
    assert first.json()["title"] == title
    assert second.status_code == 404
    assert second.json() == {"message": f"Movie with id {movie_id} not found!"}


def test_database_error_is_500(client: TestClient, db_transaction: Session) -> None:
    db_transaction.connection().exec_driver_sql("DROP TABLE movies")
    db_transaction.commit()

    r = client.get(API)

    assert r.status_code == 500
    assert "movies" in r.json()["message"]


def test_create_movie_malformed_json(client: TestClient) -> None:
    r = client.post(
        API,
        content='{"title": ',
        headers={"Content-Type": "application/json"},
    )

    assert r.status_code == 400
    assert r.json() == {"error": "JSON decode error"}


def test_create_movie_numeric_title(client: TestClient, movie_payload) -> None:
    r = client.post(API, json=movie_payload(title=1917))

    assert r.status_code == 201
    assert r.json()["title"] == "1917"
