from __future__ import annotations

from flask import Flask

from dialectcss.compiler import Compiler
from dialectcss.config import CompilerConfig
from dialectcss.session import StyleSession


def create_app(
    session: StyleSession | None = None,
    config: dict | None = None,
) -> Flask:
    """Create and configure the Flask app.

    Keys of *config* matching :class:`CompilerConfig` fields configure the
    compiler; every key is also copied into ``app.config``.
    """
    app = Flask(__name__)
    app.config.update(config or {})

    if session is None:
        compiler_config = CompilerConfig.from_mapping(config)
        session = StyleSession(Compiler(compiler_config))

    app.extensions["session"] = session
    app.extensions["compiler"] = session.compiler

    # Register blueprints
    from dialectcss.web.routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    return app
