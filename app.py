import logging
import threading
import uuid
from collections import OrderedDict

from flask import Flask, flash, jsonify, redirect, render_template, request, session, url_for

from report_form.client import BackendClient
from report_form.config import load_settings
from report_form.form import BUSY_MESSAGE, BUSY_TITLE, ReportForm
from report_form.schema import sections

logger = logging.getLogger(__name__)


FORM_VARIANTS = {
    "report": ReportForm.for_submission,
    "generate": ReportForm.for_generation,
}


class FormRegistry:
    """Live ReportForm instances, one per browser session and variant.

    Forms exist only in memory; restarting the app discards every draft.
    At most ``max_forms`` are kept; the least recently used one is dropped
    when a new form would exceed that.
    """

    def __init__(self, backend, max_forms=1000):
        self.backend = backend
        self.max_forms = max_forms
        self._forms = OrderedDict()
        self._lock = threading.Lock()

    def find(self, session_id, variant):
        """Return the session's form without creating one."""
        key = (session_id, variant)
        with self._lock:
            form = self._forms.get(key)
            if form is not None:
                self._forms.move_to_end(key)
            return form

    def get(self, session_id, variant):
        key = (session_id, variant)
        with self._lock:
            form = self._forms.get(key)
            if form is not None:
                self._forms.move_to_end(key)
                return form
            form = FORM_VARIANTS[variant](self.backend)
            self._forms[key] = form
            logger.debug("Created %s form for session %s", variant, session_id[:8])
            while len(self._forms) > self.max_forms:
                (old_session, old_variant), _ = self._forms.popitem(last=False)
                logger.debug("Evicted %s form for session %s", old_variant, old_session[:8])
            return form

    def __len__(self):
        return len(self._forms)


def notify(title, description, category):
    flash({"title": title, "description": description}, category)


def create_app(settings=None, backend=None):
    settings = settings or load_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = Flask(__name__)  # uses templates and static folders by default
    app.config["SECRET_KEY"] = settings.secret_key

    forms = FormRegistry(backend or BackendClient(settings), max_forms=settings.max_forms)
    app.extensions["report_forms"] = forms

    def session_id():
        if "form_session" not in session:
            session["form_session"] = uuid.uuid4().hex
        return session["form_session"]

    def handle_form(variant, endpoint, title):
        if request.method == "POST":
            form = forms.get(session_id(), variant)
            result = form.submit(request.form)
            if result is None:
                notify(BUSY_TITLE, BUSY_MESSAGE, "info")
            elif result.ok:
                notify(result.title, result.message, "success")
                # redirect-after-POST; the preview waits on the form for the next GET
                form.preview = result.html_content
                return redirect(url_for(endpoint))
            elif result.errors:
                return render_form(form, endpoint, title, status=400)
            else:
                notify(result.title, result.message, "error")
            return render_form(form, endpoint, title)

        # GETs never register a form
        form = forms.find(session.get("form_session", ""), variant)
        if form is None:
            form = FORM_VARIANTS[variant](forms.backend)
        form.clear_errors()
        return render_form(form, endpoint, title, generated_html=form.take_preview())

    def render_form(form, endpoint, title, status=200, generated_html=None):
        return (
            render_template(
                "report_form.html",
                title=title,
                action=url_for(endpoint),
                form=form,
                sections=sections(form.model),
                values=form.draft.values(),
                errors=form.errors,
                generated_html=generated_html,
            ),
            status,
        )

    @app.route("/")
    def home():
        return render_template("index.html")

    @app.route("/report", methods=["GET", "POST"])
    def report():
        return handle_form("report", "report", "Sustainability Report")

    @app.route("/report/generate", methods=["GET", "POST"])
    def generate():
        return handle_form("generate", "generate", "Generated Sustainability Report")

    @app.route("/health")
    def health():
        return jsonify({"status": "ok"})

    return app


if __name__ == "__main__":
    create_app().run(debug=True)
