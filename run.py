"""
Local entry point.

    flask --app run.py init-db
    flask --app run.py seed-zombies
    flask --app run.py --debug run
"""

from app import create_app

app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
