"""
Project scaffolding

Creates the directory layout of a new statapp project.
"""

from pathlib import Path
from typing import List

from ..config.settings import AppSettings, appsettings
from .files import directory_make
from .log import LOG


class AppGenerator:
    """Generate a new project directory structure"""

    def __init__(self, project_dir: Path, settings: AppSettings = appsettings) -> None:
        self.project_dir = Path(project_dir)
        self.settings = settings

    def layout_get(self) -> List[tuple]:
        """(description, relative directory) for every project directory"""
        s = self.settings
        return [
            ("HTML pages", s.pages_dir),
            ("HTML partials", s.partials_dir),
            ("styles", s.styles_dir),
            ("images", s.images_dir),
            ("fonts", s.fonts_dir),
            ("locales", s.locales_dir),
            ("licences", s.licences_dir),
            ("scripts", s.scripts_dir),
        ]

    def generate(self) -> List[Path]:
        """
        Create every project directory that does not exist yet

        Returns:
            Directories created by this call

        Raises:
            IOFailure: A directory could not be created
        """
        created = []
        for name, subdir in self.layout_get():
            path = self.project_dir / subdir
            if path.is_dir():
                LOG(f"{name} directory '{path}' already exists", level=2)
                continue
            directory_make(path)
            LOG(f"Created {name} directory '{path}'", level=1)
            created.append(path)
        LOG(f"Project created in '{self.project_dir}'", level=1)
        return created
