"""
App compiler: runs the three build stages and finishes the bundle

Transforms a statapp project into a static app:

    stage 1  PartialResolver   pages + partials   → <output>/<temp_dir>/
    stage 2  StyleResolver     styles             → <output>/<styles_dir>/
    stage 3  ScriptResolver    scripts            → <output>/<scripts_dir>/, pages → <output>/

then removes the temporary directory and copies the static assets.
"""

from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..config.settings import AppSettings, appsettings
from .compressor import TextCompressor, compressors_make
from .errors import ErrorType, IOFailure, StatAppError
from .files import assets_mirror, directory_make, directory_remove, files_list, text_read, text_write
from .log import LOG, ERROR
from .partials import PartialResolver
from .scripts import ScriptResolver
from .styles import StyleResolver


class AppCompiler:
    """
    Compiles a statapp project to a static app

    Responsibilities:
    - Run partial, style and script stages strictly in order
    - Abort on the first failing stage
    - Remove the temporary directory on success
    - Mirror static assets and compress locales
    """

    def __init__(
        self,
        project_dir: Path,
        output_dir: Path,
        settings: AppSettings = appsettings,
        compressors: Optional[Mapping[str, TextCompressor]] = None,
    ) -> None:
        """
        Initialize compiler

        Args:
            project_dir: Project root (pages, partials, styles, scripts, assets)
            output_dir: Directory for the compiled app
            settings: Directory layout, markers, bundle names and flags
            compressors: Compressor per content type (default: from settings)
        """
        self.project_dir = Path(project_dir)
        self.output_dir = Path(output_dir)
        self.settings = settings
        self.compressors = compressors if compressors is not None else compressors_make(settings)
        self.warnings: List[str] = []

    def compile(self) -> Dict[str, Any]:
        """
        Compile the project

        Returns:
            dict with compilation results:
                status, output_dir, pages, global_styles, global_scripts, warnings

        Raises:
            StatAppError: The first stage failure (after reporting it)
        """
        LOG("Starting compilation...", level=2)
        directory_make(self.output_dir)

        self.stage_run("partials", PartialResolver(
            self.project_dir, self.output_dir, self.settings,
        ).run)
        styles = self.stage_run("styles", StyleResolver(
            self.project_dir, self.output_dir, self.settings, self.compressors,
        ).run)
        scripts = self.stage_run("scripts", ScriptResolver(
            self.project_dir, self.output_dir, self.settings, self.compressors,
        ).run)

        temp_dir = self.output_dir / self.settings.temp_dir
        if self.settings.debug_mode:
            LOG(f"Keeping temporary directory {temp_dir}", level=2)
        else:
            directory_remove(temp_dir)

        self.assets_copy()

        return {
            'status': True,
            'output_dir': str(self.output_dir),
            'pages': scripts['pages'],
            'global_styles': styles['global'],
            'global_scripts': scripts['global'],
            'warnings': list(self.warnings),
        }

    def stage_run(self, name: str, stage: Callable[[], Any]) -> Any:
        """Run one stage, reporting its failure before re-raising"""
        LOG(f"Compiling {name}...", level=1)
        try:
            return stage()
        except StatAppError as e:
            ERROR(f"Stage '{name}' failed: {e}")
            raise

    def warning_add(self, message: str, error: Optional[Exception] = None) -> None:
        """Report an asset warning; fatal in strict mode"""
        if self.settings.strict_mode:
            if error is not None:
                raise error
            raise IOFailure(message)
        ERROR(message, ErrorType.WARNING)
        self.warnings.append(message)

    def assets_copy(self) -> None:
        """Copy image, licence and font folders, then compress locales"""
        for subdir in [self.settings.images_dir, self.settings.licences_dir, self.settings.fonts_dir]:
            self.asset_mirror(subdir)
        self.locales_compress()
        self.asset_mirror(self.settings.locales_dir)

    def asset_mirror(self, subdir: str) -> None:
        """Mirror one static asset folder into the output tree"""
        src = self.project_dir / subdir
        if not src.is_dir():
            self.warning_add(f"Could not copy static content directory '{src}': not found")
            return
        try:
            copied = assets_mirror(src, self.output_dir / subdir)
            LOG(f"Copied {copied} file(s) from {subdir}/ to output", level=3)
        except IOFailure as e:
            self.warning_add(f"Could not copy static content directory '{src}': {e}", e)

    def locales_compress(self) -> None:
        """Compress every Javascript locale file into the output locale folder"""
        src = self.project_dir / self.settings.locales_dir
        if not src.is_dir():
            return
        try:
            target = directory_make(self.output_dir / self.settings.locales_dir)
            compressor = self.compressors["js"]
            for locale in files_list(src):
                LOG(f"Compressing locale: {locale.name}", level=2)
                text_write(target / locale.name, compressor.compress(text_read(locale)))
        except IOFailure as e:
            self.warning_add(f"Could not copy all locale files: {e}", e)
