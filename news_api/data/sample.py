from datetime import datetime, timezone


def _ts(*args) -> datetime:
    return datetime(*args, tzinfo=timezone.utc)


DEFAULT_IMG = "https://images.pexels.com/photos/158651/news-newsletter-newspaper-information-158651.jpeg?w=700&h=700"

topics = [
    {"slug": "mitch", "description": "The man, the Mitch, the legend"},
    {"slug": "cats", "description": "Not dogs"},
    {"slug": "paper", "description": "what books are made of"},
]

users = [
    {
        "username": "butter_bridge",
        "name": "jonny",
        "avatar_url": "https://www.healthytherapies.com/wp-content/uploads/2016/06/Lime3.jpg",
    },
    {
        "username": "icellusedkars",
        "name": "sam",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24604688?s=460&v=4",
    },
    {
        "username": "rogersop",
        "name": "paul",
        "avatar_url": "https://avatars2.githubusercontent.com/u/24394918?s=400&v=4",
    },
    {
        "username": "lurker",
        "name": "do_nothing",
        "avatar_url": "https://www.golenbock.com/wp-content/uploads/2015/01/placeholder-user.png",
    },
]

# Inserted in this order, so article_id 1..13 follows list position.
articles = [
    {
        "title": "Living in the shadow of a great man",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "I find this existence challenging",
        "created_at": _ts(2020, 7, 9, 20, 11),
        "votes": 100,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Sony Vaio; or, The Laptop",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Call me Mitchell. Some years ago, never mind how long precisely, having little or no money in my purse, I thought I would buy a laptop.",
        "created_at": _ts(2020, 10, 16, 5, 3),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Eight pug gifs that remind me of why I came to work today",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "some gifs",
        "created_at": _ts(2020, 11, 3, 9, 12),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Student SUES Mitch!",
        "topic": "mitch",
        "author": "rogersop",
        "body": "We all love Mitch and his wonderful, unique typing style. However, the volume of his typing has ALLEGEDLY burst another students eardrums.",
        "created_at": _ts(2020, 5, 6, 1, 14),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "UNCOVERED: catspiracy to bring down democracy",
        "topic": "cats",
        "author": "rogersop",
        "body": "Bastet walks amongst us, and the cats are taking arms!",
        "created_at": _ts(2020, 8, 3, 13, 14),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "A",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Delicious tin of cat food",
        "created_at": _ts(2020, 10, 18, 1, 0),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Z",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "I was hungry.",
        "created_at": _ts(2020, 1, 7, 14, 8),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Does Mitch predate civilisation?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Archaeologists have uncovered a gigantic statue from the dawn of humanity, and it has an uncanny resemblance to Mitch.",
        "created_at": _ts(2020, 4, 17, 1, 8),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "They're not exactly dogs, are they?",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Well? Think about it.",
        "created_at": _ts(2020, 6, 6, 9, 10),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Seven inspirational thought leaders from Manchester UK",
        "topic": "mitch",
        "author": "rogersop",
        "body": "Who are we kidding, there is only one, and it's Mitch!",
        "created_at": _ts(2020, 5, 14, 4, 15),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Am I a cat?",
        "topic": "mitch",
        "author": "icellusedkars",
        "body": "Having run out of ideas for articles, I am staring at the wall blankly, like a cat. Does this make me a cat?",
        "created_at": _ts(2020, 1, 15, 22, 21),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Moustache",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "Have you seen the size of that thing?",
        "created_at": _ts(2020, 10, 11, 11, 24),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
    {
        "title": "Another article about Mitch",
        "topic": "mitch",
        "author": "butter_bridge",
        "body": "There will never be enough articles about Mitch!",
        "created_at": _ts(2020, 10, 11, 11, 24),
        "votes": 0,
        "article_img_url": DEFAULT_IMG,
    },
]

comments = [
    {
        "article_title": "They're not exactly dogs, are they?",
        "author": "butter_bridge",
        "body": "Oh, I've got compassion running out of my nose, pal! I'm the Sultan of Sentiment!",
        "votes": 16,
        "created_at": _ts(2020, 4, 6, 12, 17),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "butter_bridge",
        "body": "The beautiful thing about treasure is that it exists. Got to find out what kind of sheets these are; not cotton, not rayon, silky.",
        "votes": 14,
        "created_at": _ts(2020, 10, 31, 3, 3),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "icellusedkars",
        "body": "Replacing the quiet elegance of the dark suit and tie with the casual indifference of these muted earth tones is a form of fashion suicide, but, uh, call me crazy - on you it works.",
        "votes": 100,
        "created_at": _ts(2020, 3, 1, 1, 13),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "icellusedkars",
        "body": "I carry a log - yes. Is it funny to you? It is not to me.",
        "votes": -100,
        "created_at": _ts(2020, 2, 23, 12, 1),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "icellusedkars",
        "body": "I hate streaming noses",
        "votes": 0,
        "created_at": _ts(2020, 11, 3, 21, 0),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "icellusedkars",
        "body": "I hate streaming eyes even more",
        "votes": 0,
        "created_at": _ts(2020, 4, 11, 21, 2),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "icellusedkars",
        "body": "Lobster pot",
        "votes": 0,
        "created_at": _ts(2020, 5, 15, 20, 19),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "icellusedkars",
        "body": "Delicious crackerbreads",
        "votes": 0,
        "created_at": _ts(2020, 4, 14, 20, 19),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "icellusedkars",
        "body": "Superficially charming",
        "votes": 0,
        "created_at": _ts(2020, 1, 1, 3, 8),
    },
    {
        "article_title": "Eight pug gifs that remind me of why I came to work today",
        "author": "icellusedkars",
        "body": "git push origin master",
        "votes": 0,
        "created_at": _ts(2020, 6, 20, 7, 24),
    },
    {
        "article_title": "Eight pug gifs that remind me of why I came to work today",
        "author": "icellusedkars",
        "body": "Ambidextrous marsupial",
        "votes": 0,
        "created_at": _ts(2020, 9, 19, 23, 10),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "icellusedkars",
        "body": "Massive intercranial brain haemorrhage",
        "votes": 0,
        "created_at": _ts(2020, 3, 2, 7, 10),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "icellusedkars",
        "body": "Fruit pastilles",
        "votes": 0,
        "created_at": _ts(2020, 6, 15, 10, 25),
    },
    {
        "article_title": "UNCOVERED: catspiracy to bring down democracy",
        "author": "icellusedkars",
        "body": "What do you see? I have no idea where this will lead us. This place I speak of, is known as the Black Lodge.",
        "votes": 16,
        "created_at": _ts(2020, 6, 9, 5, 0),
    },
    {
        "article_title": "UNCOVERED: catspiracy to bring down democracy",
        "author": "butter_bridge",
        "body": "I am 100% sure that we're not completely sure.",
        "votes": 1,
        "created_at": _ts(2020, 11, 24, 0, 8),
    },
    {
        "article_title": "A",
        "author": "butter_bridge",
        "body": "This is a bad article name",
        "votes": 1,
        "created_at": _ts(2020, 10, 11, 15, 23),
    },
    {
        "article_title": "They're not exactly dogs, are they?",
        "author": "icellusedkars",
        "body": "The owls are not what they seem.",
        "votes": 20,
        "created_at": _ts(2020, 3, 14, 17, 2),
    },
    {
        "article_title": "Living in the shadow of a great man",
        "author": "butter_bridge",
        "body": "This morning, I showered for nine seconds.",
        "votes": 16,
        "created_at": _ts(2020, 7, 21, 0, 20),
    },
]
