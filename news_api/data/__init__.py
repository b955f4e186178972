# Seed datasets.  Each module exposes ``topics``, ``users``, ``articles``
# and ``comments`` lists in the shape ``news_api.seed.seed`` expects:
# articles reference topics/users by key, comments reference their
# article by title.
