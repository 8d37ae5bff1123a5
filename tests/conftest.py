"""Pytest fixtures: an app bound to in-memory SQLite and a seeded portfolio."""

from datetime import date

import pytest

from app import create_app
from extensions import db
from models import Experience, Project, Skill


@pytest.fixture
def app():
    app = create_app('testing')
    app.config['DEFAULT_THEME'] = 'dark'
    app.config['SKILL_ICON_CDN'] = 'https://cdn.simpleicons.org'
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def seeded(app):
    db.session.add_all([
        Skill(name='Python', category='Languages', type='icon'),
        Skill(name='C++', category='Languages', type='icon'),
        Skill(name='Figma', category='Design', svg='https://example.com/figma.svg', type='icon'),
        Skill(name='Agile', category='Practices', type='text-only'),
        Skill(name='Code Review', category='Practices', type='text-only'),
    ])
    db.session.add_all([
        Experience(title='Intern', company='Acme', description='Built tools\\nFixed bugs',
                   start_date=date(2021, 6, 1), end_date=date(2021, 9, 1)),
        Experience(title='Engineer', company='Globex', description='Shipped features\n\n  Led reviews  ',
                   start_date=date(2022, 1, 10), is_current=True, logo='https://example.com/globex.png'),
    ])
    db.session.add_all([
        Project(slug='tracker', title='Tracker', tagline='Tracks things',
                cover_image_url='https://example.com/cover.png',
                gallery_image_urls=['https://example.com/1.png', 'https://example.com/2.png'],
                skills=['Flask', 'SQL'], description_markdown='# Overview\n\nA **fast** tracker.',
                repo_url='https://github.com/example/tracker', live_url='https://tracker.example.com',
                project_date=date(2023, 3, 1), status='in_progress', is_featured=True, display_order=2),
        Project(slug='blog', title='Blog', tagline='Writes things', skills=['Markdown'],
                project_date=date(2022, 5, 1), status='completed', is_featured=True, display_order=1),
        Project(slug='notes', title='Notes', tagline='Old notes app', skills=[],
                project_date=date(2024, 1, 1), status='archived', is_featured=True, display_order=2),
        Project(slug='draft', title='Draft', tagline='Not featured', skills=[],
                project_date=date(2024, 2, 1), status='completed', is_featured=False, display_order=0),
    ])
    db.session.commit()
    return app
