from cinecircle.core.interfaces import TMDBError
from cinecircle.services.media_service import MediaService


def test_search_merges_movies_and_tv(client, tmdb):
    tmdb.respond("search/movie", {
        "results": [{"id": 550, "title": "Fight Club"}],
        "total_pages": 2,
        "total_results": 30,
    })
    tmdb.respond("search/tv", {
        "results": [{"id": 1, "name": "Fight Club: The Series"}],
        "total_pages": 1,
        "total_results": 5,
    })

    response = client.get("/search", params={"q": "fight club", "page": 1})
    assert response.status_code == 200
    body = response.json()
    assert [(r["media_type"], r["title"]) for r in body["results"]] == [
        ("movie", "Fight Club"),
        ("tv", "Fight Club: The Series"),
    ]
    assert body["total_pages"] == 2
    assert body["total_results"] == 35
    assert body["query"] == "fight club"
    assert ("search/movie", {"query": "fight club", "page": 1}) in tmdb.calls


def test_search_errors(client, tmdb):
    assert client.get("/search", params={"q": "   "}).status_code == 400

    tmdb.respond("search/movie", {}, status_code=500)
    assert client.get("/search", params={"q": "x"}).status_code == 502

    tmdb.fail("search/movie", TMDBError("connection refused"))
    assert client.get("/search", params={"q": "x"}).status_code == 502


def test_media_detail_with_youtube_trailer(client, tmdb):
    tmdb.respond("movie/550", {"id": 550, "title": "Fight Club", "overview": "Soap.", "release_date": "1999-10-15"})
    tmdb.respond("movie/550/videos", {"results": [
        {"type": "Teaser", "site": "YouTube", "key": "teaser"},
        {"type": "Trailer", "site": "Vimeo", "key": "vimeo"},
        {"type": "Trailer", "site": "YouTube", "key": "youtube"},
    ]})

    body = client.get("/media/550-movie").json()
    assert body["tmdb_id"] == 550
    assert body["title"] == "Fight Club"
    assert body["media_type"] == "movie"
    assert body["trailer"] == {"key": "youtube", "site": "YouTube", "type": "Trailer"}


def test_tv_detail_uses_name_and_degrades_without_videos(client, tmdb):
    tmdb.respond("tv/1399", {"id": 1399, "name": "Game of Thrones", "first_air_date": "2011-04-17"})
    tmdb.fail("tv/1399/videos", TMDBError("timeout"))

    response = client.get("/media/1399-tv")
    assert response.status_code == 200
    assert response.json()["title"] == "Game of Thrones"
    assert response.json()["first_air_date"] == "2011-04-17"
    assert response.json()["trailer"] is None


def test_media_detail_errors(client, tmdb):
    assert client.get("/media/abc").status_code == 400
    assert client.get("/media/550-book").status_code == 400

    # nothing registered for this id: upstream answers 404
    assert client.get("/media/1-movie").status_code == 404

    tmdb.respond("movie/2", {}, status_code=503)
    assert client.get("/media/2-movie").status_code == 502

    tmdb.fail("movie/3", TMDBError("connection reset"))
    assert client.get("/media/3-movie").status_code == 502


def test_trailer_selection_falls_back_to_any_site():
    videos = [
        {"type": "Clip", "site": "YouTube", "key": "clip"},
        {"type": "Trailer", "site": "Vimeo", "key": "vimeo"},
    ]
    assert MediaService.select_trailer(videos).key == "vimeo"
    assert MediaService.select_trailer([{"type": "Clip", "site": "YouTube", "key": "clip"}]) is None
    assert MediaService.select_trailer([]) is None
