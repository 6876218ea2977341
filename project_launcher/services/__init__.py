"""Service layer for project discovery and ranking."""

from project_launcher.services.catalog import CatalogView, ProjectCatalog
from project_launcher.services.create import ProjectCreator
from project_launcher.services.path_specs import PathSpecStore, describe_path_spec
from project_launcher.services.ranking import RankingStore, compare_projects, sort_projects
from project_launcher.services.resolver import PathResolver

__all__ = [
    'CatalogView',
    'PathResolver',
    'PathSpecStore',
    'ProjectCatalog',
    'ProjectCreator',
    'RankingStore',
    'compare_projects',
    'describe_path_spec',
    'sort_projects',
]
