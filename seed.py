from healthstack import create_app
from healthstack.extensions import db
from healthstack.scripts.seed_demo import DEMO_PASSWORD, seed_demo_data

app = create_app()

with app.app_context():
    # ensure tables exist (non-destructive: won't alter existing columns)
    db.create_all()
    user = seed_demo_data()
    print(f"✅ Seed completed. Login with {user.email} / {DEMO_PASSWORD}")
