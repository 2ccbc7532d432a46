"""Routes package for the translation service."""


def register_routes(app):
    """Register all route blueprints with the application."""
    from .translate import translate_bp
    from .translations import translations_bp
    from .languages import languages_bp
    from .analytics import analytics_bp

    app.register_blueprint(translate_bp, url_prefix='/api/translate')
    app.register_blueprint(translations_bp, url_prefix='/api/translations')
    app.register_blueprint(languages_bp, url_prefix='/api/languages')
    app.register_blueprint(analytics_bp, url_prefix='/api/analytics')
