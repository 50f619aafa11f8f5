"""Study Site package.

Root of the static site generator for the research-study landing page. The
site is rendered from locale-keyed content dictionaries into one HTML tree
per locale.

Package Structure
-----------------
- `content/`:
    Locale content loading, dotted-path lookup and the path/shape schema.
- `pipeline/website_generator/`:
    View components, page composer, router, HTML output and build runner.
- `i18n.py`: Active-locale selection and change notification.
- `session.py`: A route path plus locale with cached rendering.
- `config.py`: Configuration constants, as UPPER_SNAKE_CASE.
- `exceptions.py`: The project exception hierarchy.

Examples
--------
>>> import studysite
>>> # See build_site.py or studysite.program_build_site for the CLI.

"""
