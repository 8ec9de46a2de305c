"""vulcangen -- scaffolding for Vulcan.js packages and modules.

Quick usage::

    from vulcangen.config import Config
    from vulcangen.session import Session

    session = Session(Config(cwd=Path("./my-app")))
    session.store.package_exists("blog")
"""

__version__ = "0.1.0"
