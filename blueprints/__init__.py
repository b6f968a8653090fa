"""
Blueprint registration for Yotion.

Every blueprint carries its full /api/... paths; none uses a URL prefix.
"""

from __future__ import annotations


def register_blueprints(app):
    from blueprints.language import bp as language_bp
    from blueprints.flashcards import bp as flashcards_bp
    from blueprints.tech_notes import bp as tech_notes_bp
    from blueprints.projects import bp as projects_bp
    from blueprints.planner import bp as planner_bp
    from blueprints.vault import bp as vault_bp

    app.register_blueprint(language_bp)
    app.register_blueprint(flashcards_bp)
    app.register_blueprint(tech_notes_bp)
    app.register_blueprint(projects_bp)
    app.register_blueprint(planner_bp)
    app.register_blueprint(vault_bp)
