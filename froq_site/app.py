"""froq.io: Froq! Framework site with markdown docs rendering."""

import logging

from flask import Flask, render_template, abort
from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES

from froq_site.config import Settings, settings as default_settings
from froq_site.resolver import DocumentNotFound, resolve

logger = logging.getLogger(__name__)

INDEX_DOC = "_index"


def page_title(site_title: str, title: str | None = None) -> str:
    """Join site and page titles, e.g. "Froq! Framework | Docs | View"."""
    return " | ".join(filter(None, [site_title, title]))


def error_code_and_message(e: BaseException) -> tuple[int, str]:
    code = getattr(e, "code", None) or 500
    # Ensure valid code
    if not isinstance(code, int) or not 100 <= code <= 599:
        code = 500
    message = "Internal server error"
    if code >= 400:
        message = HTTP_STATUS_CODES.get(code, message)
    return code, message


def create_app(settings: Settings | None = None) -> Flask:
    settings = settings or default_settings

    app = Flask(__name__, static_url_path="/asset", static_folder="static/asset")
    app.config["SITE_SETTINGS"] = settings

    @app.context_processor
    def page_helpers():
        return {
            "page_title": lambda title=None: page_title(settings.site_title, title),
            "page_description": lambda: settings.site_description,
            "site_title": settings.site_title,
        }

    def render_doc(doc_id: str, is_index_request: bool):
        try:
            doc = resolve(
                doc_id,
                is_index_request,
                docs_dir=settings.docs_dir,
                base_title=settings.docs_title,
            )
        except DocumentNotFound:
            abort(404)
        return render_template("docs.html", title=doc.title, content=doc.content, toc=doc.toc)

    # ── Routes ────────────────────────────────────────────────────────

    @app.route("/")
    def index():
        return render_template("home.html")

    @app.route("/docs", strict_slashes=False)
    def docs_index():
        return render_doc(INDEX_DOC, is_index_request=True)

    @app.route("/docs/<doc_id>", strict_slashes=False)
    def docs_page(doc_id):
        """Render a doc page from the docs directory."""
        return render_doc(doc_id, is_index_request=False)

    @app.route("/favicon.ico")
    def favicon():
        return "", 204

    # ── Errors ────────────────────────────────────────────────────────

    @app.errorhandler(HTTPException)
    @app.errorhandler(Exception)
    def error(e):
        code, message = error_code_and_message(e)
        if code >= 500:
            logger.error("Unhandled error: %s", e, exc_info=not isinstance(e, HTTPException))
        else:
            logger.info("%s %s", code, message)
        return render_template("_error.html", title=message, code=code, message=message), code

    return app


app = create_app()


def main():
    logging.basicConfig(
        level=default_settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    logger.info("Serving docs from %s", default_settings.docs_dir)
    app.run(host=default_settings.host, port=default_settings.port, debug=default_settings.debug)


if __name__ == "__main__":
    main()
