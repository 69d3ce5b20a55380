"""Create all tables and seed an admin account plus sample blog/content entries.

Usage: python scripts/seed_data.py [--schema-only]
"""
import argparse
import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from app.database import SessionLocal, engine, Base
import app.models  # noqa: F401

from app.models.staff import Staff
from app.services import staff_service
from app.services.blog_service import build_blog_service
from app.services.content_service import build_content_service


def init_db():
    print("Creating all database tables...")
    Base.metadata.create_all(bind=engine)


def seed():
    init_db()
    db = SessionLocal()
    try:
        if db.query(Staff).count() > 0:
            print("Database already seeded. Skipping.")
            return

        admin_email = os.environ.get("KADO_ADMIN_EMAIL", "admin@kado.org")
        admin_password = os.environ.get("KADO_ADMIN_PASSWORD", "kado")
        staff_service.save_staff(db, None, {
            "email": admin_email,
            "password": admin_password,
            "name": "Kado Admin",
        })

        blog = build_blog_service(db)
        welcome = blog.save(None, {
            "title": "Welcome to Kado",
            "uri": "welcome-to-kado",
            "active": True,
            "content": "# Welcome\n\nThis is the first post.",
            "html": "<h1>Welcome</h1>\n<p>This is the first post.</p>",
        })
        blog.save(welcome.record.id, {
            "title": "Welcome to Kado",
            "uri": "welcome-to-kado",
            "active": True,
            "content": "# Welcome\n\nThis is the first post, edited.",
            "html": "<h1>Welcome</h1>\n<p>This is the first post, edited.</p>",
        })

        content = build_content_service(db)
        for title, uri in (("About", "about"), ("Contact", "contact")):
            content.save(None, {
                "title": title,
                "uri": uri,
                "active": True,
                "content": f"# {title}",
                "html": f"<h1>{title}</h1>",
            })

        print(f"Seed complete. Admin login: {admin_email}")
    finally:
        db.close()


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--schema-only", action="store_true", help="create tables without sample data")
    args = parser.parse_args()
    if args.schema_only:
        init_db()
    else:
        seed()
