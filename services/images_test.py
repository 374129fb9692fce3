import unittest
from unittest.mock import MagicMock

import requests

from services.cache import get_mock_cache_client
from services.images import ImageSearchError, UnsplashClient, search_images


def unsplash_photo(photo_id="abc123", alt="A mountain lake"):
    return {
        "id": photo_id,
        "alt_description": alt,
        "urls": {
            "thumb": f"https://images.unsplash.com/{photo_id}?w=200",
            "small": f"https://images.unsplash.com/{photo_id}?w=400",
            "regular": f"https://images.unsplash.com/{photo_id}?w=1080",
        },
        "user": {
            "name": "Jane Doe",
            "links": {"html": "https://unsplash.com/@janedoe"},
        },
    }


def mock_response(payload, ok=True, status_code=200):
    response = MagicMock()
    response.ok = ok
    response.status_code = status_code
    response.json.return_value = payload
    return response


class TestUnsplashClient(unittest.TestCase):

    def setUp(self):
        self.mock_session = MagicMock()
        self.client = UnsplashClient(access_key="test-key", base_url="https://api.unsplash.test/", session=self.mock_session)
        self.mock_cache_client = get_mock_cache_client()

    def test_search_reshapes_results(self):
        self.mock_session.get.return_value = mock_response({"results": [unsplash_photo("a"), unsplash_photo("b", alt=None)]})

        images = self.client.search("mountains", per_page=2)

        self.assertEqual(images, [
            {"id": "a", "url": "https://images.unsplash.com/a?w=1080", "photographer": "Jane Doe", "description": "A mountain lake"},
            {"id": "b", "url": "https://images.unsplash.com/b?w=1080", "photographer": "Jane Doe", "description": None},
        ])

        args, kwargs = self.mock_session.get.call_args
        self.assertEqual(args[0], "https://api.unsplash.test/search/photos")
        self.assertEqual(kwargs["params"], {"query": "mountains", "per_page": 2, "orientation": "landscape"})
        self.assertEqual(kwargs["headers"], {"Authorization": "Client-ID test-key"})

    def test_random_normalises_single_object(self):
        self.mock_session.get.return_value = mock_response(unsplash_photo("solo", alt=None))

        images = self.client.random("ocean", count=1)

        self.assertEqual(len(images), 1)
        self.assertEqual(images[0], {
            "id": "solo",
            "thumbUrl": "https://images.unsplash.com/solo?w=200",
            "previewUrl": "https://images.unsplash.com/solo?w=400",
            "fullUrl": "https://images.unsplash.com/solo?w=1080",
            "photographer": "Jane Doe",
            "photographerProfile": "https://unsplash.com/@janedoe",
            "description": "Unsplash Image",
        })
        self.assertEqual(self.mock_session.get.call_args.args[0], "https://api.unsplash.test/photos/random")

    def test_random_list(self):
        self.mock_session.get.return_value = mock_response([unsplash_photo("a"), unsplash_photo("b")])
        images = self.client.random("ocean", count=2)
        self.assertEqual([img["id"] for img in images], ["a", "b"])

    def test_remote_errors_joined(self):
        self.mock_session.get.return_value = mock_response(
            {"errors": ["OAuth error", "The access token is invalid"]}, ok=False, status_code=401
        )
        with self.assertRaisesRegex(ImageSearchError, "OAuth error, The access token is invalid") as ctx:
            self.client.search("mountains")
        self.assertEqual(ctx.exception.status_code, 502)

    def test_remote_error_without_body(self):
        response = mock_response(None, ok=False, status_code=500)
        response.json.side_effect = ValueError("no json")
        self.mock_session.get.return_value = response

        with self.assertRaisesRegex(ImageSearchError, "Error fetching random images"):
            self.client.random("mountains")

    def test_network_failure(self):
        self.mock_session.get.side_effect = requests.exceptions.ConnectionError("refused")
        with self.assertRaises(ImageSearchError) as ctx:
            self.client.search("mountains")
        self.assertEqual(ctx.exception.status_code, 502)

    def test_empty_query_sad_path(self):
        with self.assertRaisesRegex(ImageSearchError, "Query parameter is required") as ctx:
            self.client.search("")
        self.assertEqual(ctx.exception.status_code, 400)
        self.mock_session.get.assert_not_called()

    def test_missing_access_key(self):
        client = UnsplashClient(access_key="", session=self.mock_session)
        with self.assertRaises(ImageSearchError) as ctx:
            client.random("mountains")
        self.assertEqual(ctx.exception.status_code, 503)
        self.mock_session.get.assert_not_called()

    # --- Cache ---

    def test_search_images_uses_cache(self):
        self.mock_session.get.return_value = mock_response({"results": [unsplash_photo("a")]})

        first = search_images(self.client, self.mock_cache_client, "Mountains", 5)
        second = search_images(self.client, self.mock_cache_client, "mountains ", 5)

        self.assertEqual(first, second)
        self.mock_session.get.assert_called_once()

    def test_search_images_cache_keyed_by_page_size(self):
        self.mock_session.get.return_value = mock_response({"results": [unsplash_photo("a")]})

        search_images(self.client, self.mock_cache_client, "mountains", 5)
        search_images(self.client, self.mock_cache_client, "mountains", 10)

        self.assertEqual(self.mock_session.get.call_count, 2)


if __name__ == "__main__":
    unittest.main()
