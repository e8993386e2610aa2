"""
Runs the task API. Database and listen settings come from the environment
(DB_HOST, DB_USER, DB_PASSWORD, DB_NAME or DATABASE_URL, HOST, PORT).
Create the table first with `flask --app flask_server init-db`, or set
DB_CREATE_SCHEMA=true.
"""

from tasktracker import create_app

app = create_app()

if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=False)
