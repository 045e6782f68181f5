import os

from flask import Flask, render_template

from date_code_routes import init_date_code_routes


# -------------------------------
# Flask App Setup
# -------------------------------
def create_app(config=None):
    app = Flask(__name__)
    app.secret_key = os.getenv("FLASK_SECRET", "super_secret_key")
    app.config.update(config or {})

    # -------------------------------
    # Register Date Code Routes (from date_code_routes.py)
    # -------------------------------
    init_date_code_routes(app)

    @app.route("/")
    def landing():
        return render_template("landing.html")

    return app


app = create_app()

# -------------------------------
# Main Guard
# -------------------------------
if __name__ == "__main__":
    port = int(os.environ.get("PORT", 8000))
    app.run(host="0.0.0.0", port=port, debug=os.getenv("FLASK_DEBUG") == "1")
