"""Project model, Maven defaults, and project-file IO."""

from buildconv_tooling.project.loader import (
    dump_project_file,
    layout_from_dict,
    layout_to_dict,
    load_project_file,
)
from buildconv_tooling.project.maven import maven_default_bindings, maven_default_layout
from buildconv_tooling.project.model import ProjectModel

__all__ = [
    "ProjectModel",
    "dump_project_file",
    "layout_from_dict",
    "layout_to_dict",
    "load_project_file",
    "maven_default_bindings",
    "maven_default_layout",
]
