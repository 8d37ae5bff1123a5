from extensions import db
from utils.data import (
    load_experience,
    load_featured_projects,
    load_project,
    load_project_slugs,
    load_skills,
)


def test_skills_ordered_by_name(seeded):
    assert [s['name'] for s in load_skills()] == ['Agile', 'C++', 'Code Review', 'Figma', 'Python']


def test_experience_most_recent_first(seeded):
    entries = load_experience()
    assert [e['title'] for e in entries] == ['Engineer', 'Intern']
    assert entries[0]['is_current'] is True
    assert entries[1]['end_date'] == '2021-09-01'


def test_featured_projects_order_and_filter(seeded):
    projects = load_featured_projects()
    assert [p['slug'] for p in projects] == ['blog', 'notes', 'tracker']
    assert 'description_markdown' not in projects[0]


def test_load_project_by_slug(seeded):
    project = load_project('tracker')
    assert project['title'] == 'Tracker'
    assert project['gallery_image_urls'] == ['https://example.com/1.png', 'https://example.com/2.png']
    assert project['project_date'] == '2023-03-01'
    assert load_project('missing') is None


def test_project_slugs(seeded):
    assert [p['slug'] for p in load_project_slugs()] == ['blog', 'draft', 'notes', 'tracker']


def test_empty_store(app):
    assert load_skills() == []
    assert load_featured_projects() == []


def test_query_failures_yield_empty_results(app, caplog):
    db.drop_all()
    assert load_skills() == []
    db.session.rollback()
    assert load_experience() == []
    db.session.rollback()
    assert load_project('tracker') is None
    assert any('Error fetching skills' in r.getMessage() for r in caplog.records)
