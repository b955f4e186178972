# Services package.
#
# Each module exposes the async accessors for a single table:
#
#   topic_service    - topic listing and lookup by slug
#   article_service  - article detail, filtered/sorted listing, vote increments
#   comment_service  - comments per article, create, delete, vote increments
#   user_service     - user listing and lookup by username
#
# All service functions accept an AsyncSession as their first argument
# so that the router layer controls the transaction boundary via the
# ``get_db`` dependency.  Lookups that match no row raise ``NotFound``.
