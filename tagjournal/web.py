"""Flask facade over the log store, tag index and history query."""

import logging

from flask import Flask, Response, render_template, request

from tagjournal import history
from tagjournal.config import Config

logger = logging.getLogger(__name__)

PERSISTED_HEADER = "X-Journal-Persisted"


class MalformedRequest(ValueError):
    pass


def parse_submission(payload) -> str:
    """Return the ``text`` field of a submission body or raise MalformedRequest."""
    if not isinstance(payload, dict):
        raise MalformedRequest("Body must be a JSON object")
    text = payload.get("text")
    if not isinstance(text, str):
        raise MalformedRequest("Field 'text' must be a string")
    try:
        text.encode("utf-8")
    except UnicodeEncodeError:
        raise MalformedRequest("Field 'text' is not valid unicode") from None
    return text


def _text(body: str, status: int = 200) -> Response:
    return Response(body, status=status, mimetype="text/plain")


def create_app(store, index, config: Config | None = None) -> Flask:
    config = config or Config()
    app = Flask(__name__)
    app.config["components"] = {
        "config": config,
        "store": store,
        "index": index,
    }

    @app.before_request
    def log_request():
        logger.info("Got a request: %s %s", request.method, request.path)

    @app.errorhandler(MalformedRequest)
    def malformed(exc):
        return _text(f"Error 400\n{exc}", 400)

    @app.errorhandler(404)
    @app.errorhandler(405)
    def not_found(_exc):
        return _text(f"Error 404\n{request.method} {request.full_path.rstrip('?')}", 404)

    @app.route("/", methods=["GET"])
    def index_page():
        return render_template("index.html", debug_console=config.debug)

    @app.route("/", methods=["POST"])
    def submit():
        text = parse_submission(request.get_json(force=True, silent=True))

        result = store.append(text)
        new_tags = index.merge(text)
        if new_tags:
            logger.info("New tags: %s", ", ".join(sorted(new_tags)))

        if not result.persisted and config.report_write_failures:
            return _text(f"Failed to write entry to {result.partition}", 500)

        resp = _text(f"field's value is {text}")
        resp.headers[PERSISTED_HEADER] = "true" if result.persisted else "false"
        return resp

    @app.route("/tags")
    def tags():
        return _text(", ".join(index.snapshot()))

    @app.route("/history")
    def all_history():
        return _text(history.render(history.all_history(store)))

    @app.route("/history/<int:year>/<int:month>")
    def month_history(year, month):
        return _text(history.render(history.history_for(store, year, month)))

    return app
