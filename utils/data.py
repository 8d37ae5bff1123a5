"""
Data Management Module - Read-only queries for the portfolio sections
Every query degrades to an empty result so a section renders empty instead of failing the page
"""

from flask import current_app
from models import Skill, Experience, Project


def _format_date(value):
    return value.strftime('%Y-%m-%d') if value else None


def load_skills():
    """Load all skills ordered by name"""
    try:
        skills = Skill.query.order_by(Skill.name.asc()).all()
        return [skill_to_dict(s) for s in skills]
    except Exception as e:
        current_app.logger.error(f"Error fetching skills: {str(e)}")
        return []


def load_experience():
    """Load all experience entries, most recent first"""
    try:
        entries = Experience.query.order_by(Experience.start_date.desc()).all()
        return [experience_to_dict(e) for e in entries]
    except Exception as e:
        current_app.logger.error(f"Error fetching experience: {str(e)}")
        return []


def load_featured_projects():
    """Load featured projects by display order, newest first within the same order"""
    try:
        projects = (Project.query
                    .filter_by(is_featured=True)
                    .order_by(Project.display_order.asc(), Project.project_date.desc())
                    .all())
        return [project_summary_to_dict(p) for p in projects]
    except Exception as e:
        current_app.logger.error(f"Error fetching projects: {str(e)}")
        return []


def load_project(slug):
    """
    Load a single project by slug

    Args:
        slug (str): Project slug from the URL

    Returns:
        dict: Project data, or None when missing or the query fails
    """
    try:
        project = Project.query.filter_by(slug=slug).first()
        return project_to_dict(project) if project else None
    except Exception as e:
        current_app.logger.error(f"Error fetching project {slug}: {str(e)}")
        return None


def load_project_slugs():
    """Load every project slug with its last update, for the sitemap"""
    try:
        rows = Project.query.with_entities(Project.slug, Project.updated_at).order_by(Project.slug.asc()).all()
        return [{'slug': slug, 'updated_at': _format_date(updated_at)} for slug, updated_at in rows]
    except Exception as e:
        current_app.logger.error(f"Error fetching project slugs: {str(e)}")
        return []


def skill_to_dict(skill):
    """Convert skill model to dictionary"""
    return {
        'id': skill.id,
        'name': skill.name,
        'category': skill.category,
        'proficiency': skill.proficiency,
        'svg': skill.svg,
        'type': skill.type or 'icon'
    }


def experience_to_dict(experience):
    """Convert experience model to dictionary"""
    return {
        'id': experience.id,
        'title': experience.title,
        'company': experience.company,
        'description': experience.description,
        'start_date': _format_date(experience.start_date),
        'end_date': _format_date(experience.end_date),
        'is_current': bool(experience.is_current),
        'logo': experience.logo
    }


def project_summary_to_dict(project):
    """Convert project model to the card fields shown on the home page"""
    return {
        'id': project.id,
        'slug': project.slug,
        'title': project.title,
        'tagline': project.tagline or '',
        'cover_image_url': project.cover_image_url,
        'skills': project.skills or [],
        'live_url': project.live_url,
        'repo_url': project.repo_url,
        'is_featured': bool(project.is_featured),
        'display_order': project.display_order
    }


def project_to_dict(project):
    """Convert project model to dictionary"""
    result = project_summary_to_dict(project)
    result.update({
        'description_markdown': project.description_markdown,
        'gallery_image_urls': project.gallery_image_urls or [],
        'project_date': _format_date(project.project_date),
        'status': project.status or '',
        'category': project.category or ''
    })
    return result


__all__ = [
    'load_skills',
    'load_experience',
    'load_featured_projects',
    'load_project',
    'load_project_slugs',
    'skill_to_dict',
    'experience_to_dict',
    'project_summary_to_dict',
    'project_to_dict'
]
