import os
from dotenv import load_dotenv
load_dotenv()
from flask import Flask
from flask_cors import CORS
from flask_migrate import Migrate
from config import config_dict
from models import db
from routes.lecturers import lecturer_bp
from routes.students import student_bp

migrate = Migrate()


def create_app(env=None, config_overrides=None):
    app = Flask(__name__)

    env = (env or os.environ.get("FLASK_ENV", "production")).lower()
    app.config.from_object(config_dict.get(env, config_dict["production"]))
    if config_overrides:
        app.config.update(config_overrides)

    CORS(app, resources={r"/api/*": {"origins": app.config["CORS_ORIGINS"]}}, supports_credentials=True)

    db.init_app(app)
    migrate.init_app(app, db)

    app.register_blueprint(lecturer_bp, url_prefix='/api/lecturer')
    app.register_blueprint(student_bp, url_prefix='/api/student')

    @app.route('/')
    def home():
        return "Welcome to the LMS App!"

    app.logger.info("Environment: %s", env)
    return app


if __name__ == '__main__':
    app = create_app()
    app.run(debug=app.config['DEBUG'])
