from .home_routes import home_bp
from .auth_routes import auth_bp
from .food_routes import food_bp
from .exercise_routes import exercise_bp
from .sleep_routes import sleep_bp
from .mood_routes import mood_bp
from .meal_plan_routes import meal_plan_bp

API_BLUEPRINTS = (auth_bp, food_bp, exercise_bp, sleep_bp, mood_bp, meal_plan_bp)

def register_routes(app):
    app.register_blueprint(home_bp)
    for bp in API_BLUEPRINTS:
        app.register_blueprint(bp)
