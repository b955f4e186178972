"""
Static description of the HTTP surface, served by ``GET /api``.

Keys are ``"<METHOD> <path>"`` with ``:name`` marking path parameters.
``is_valid_api_endpoint`` / ``is_valid_request_method`` define what a
documentable key looks like; the test suite checks every key against them.
"""
import re

REQUEST_METHODS: frozenset[str] = frozenset({"get", "post", "put", "patch", "delete"})

# /api, then zero or more segments that are words/hyphenated words or
# :params; no trailing slash and no trailing hyphen.
_ENDPOINT_RE = re.compile(r"^/api(?:/(?:[\w-]+(?<=\w)|:[\w-]+(?<=\w)))*$")


def is_valid_api_endpoint(path: str) -> bool:
    return _ENDPOINT_RE.fullmatch(path) is not None


def is_valid_request_method(method: str) -> bool:
    return method.lower() in REQUEST_METHODS


_EXAMPLE_ARTICLE = {
    "article_id": 1,
    "title": "Seafood substitutions are increasing",
    "topic": "cooking",
    "author": "weegembump",
    "created_at": "2018-05-30T15:59:13.341Z",
    "votes": 0,
    "article_img_url": "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700",
    "comment_count": 6,
}

_EXAMPLE_COMMENT = {
    "comment_id": 1,
    "article_id": 1,
    "author": "butter_bridge",
    "body": "Text from the comment..",
    "votes": 0,
    "created_at": "2018-05-30T15:59:13.341Z",
}

ENDPOINTS: dict[str, dict] = {
    "GET /api": {
        "description": "serves up a json representation of all the available endpoints of the api",
    },
    "GET /api/topics": {
        "description": "serves an array of all topics",
        "queries": [],
        "exampleResponse": {
            "topics": [{"slug": "football", "description": "Footie!"}],
        },
    },
    "GET /api/articles": {
        "description": "serves an array of all articles, newest first unless sorted otherwise",
        "queries": ["topic", "sort_by", "order"],
        "exampleResponse": {"articles": [_EXAMPLE_ARTICLE]},
    },
    "GET /api/articles/:article_id": {
        "description": "serves a single article, including its body and comment_count",
        "queries": [],
        "exampleResponse": {"article": {**_EXAMPLE_ARTICLE, "body": "Text from the article.."}},
    },
    "PATCH /api/articles/:article_id": {
        "description": "adds inc_votes (may be negative) to the article's votes and serves the updated article",
        "queries": [],
        "exampleRequest": {"inc_votes": 1},
        "exampleResponse": {
            "article": {**_EXAMPLE_ARTICLE, "votes": 1, "body": "Text from the article.."},
        },
    },
    "GET /api/articles/:article_id/comments": {
        "description": "serves an array of comments for the given article, newest first",
        "queries": [],
        "exampleResponse": {"comments": [_EXAMPLE_COMMENT]},
    },
    "POST /api/articles/:article_id/comments": {
        "description": "adds a comment to the given article and serves the created comment",
        "queries": [],
        "exampleRequest": {"username": "butter_bridge", "body": "Text from the comment.."},
        "exampleResponse": {"comment": _EXAMPLE_COMMENT},
    },
    "DELETE /api/comments/:comment_id": {
        "description": "deletes the given comment; responds with 204 and no body",
        "queries": [],
    },
    "PATCH /api/comments/:comment_id": {
        "description": "adds inc_votes (may be negative) to the comment's votes and serves the updated comment",
        "queries": [],
        "exampleRequest": {"inc_votes": -1},
        "exampleResponse": {"comment": {**_EXAMPLE_COMMENT, "votes": -1}},
    },
    "GET /api/users": {
        "description": "serves an array of all users",
        "queries": [],
        "exampleResponse": {
            "users": [
                {
                    "username": "butter_bridge",
                    "name": "jonny",
                    "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
                }
            ],
        },
    },
    "GET /api/users/:username": {
        "description": "serves a single user",
        "queries": [],
        "exampleResponse": {
            "user": {
                "username": "butter_bridge",
                "name": "jonny",
                "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
            },
        },
    },
}
