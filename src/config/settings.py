"""
Application settings and configuration

Uses pydantic-settings for type-safe configuration via environment variables.
All settings use STATAPP_ prefix (e.g., STATAPP_DEBUG_MODE=true).

Settings can also be loaded from a .env file in the working directory, and
overridden per project with a statapp.yaml file (see config.project).
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """
    Application configuration via environment variables.

    Environment variables use STATAPP_ prefix.

    Examples:
        STATAPP_PAGES_DIR=pages
        STATAPP_MINIFY_OUTPUT=false
        STATAPP_SCRIPT_URI_PREFIX=/
    """

    model_config = SettingsConfigDict(
        env_prefix="STATAPP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Project layout (relative to the project root)
    pages_dir: str = Field(default="html", description="Directory holding the HTML page fragments")
    partials_dir: str = Field(default="partials", description="Directory holding reusable partials")
    styles_dir: str = Field(
        default="dist/css",
        description="Stylesheet directory; also the style subdirectory of the output",
    )
    scripts_dir: str = Field(
        default="dist/js",
        description="Script directory; also the script subdirectory of the output",
    )
    images_dir: str = Field(default="assets/images", description="Static image assets")
    fonts_dir: str = Field(default="assets/fonts", description="Static font assets")
    licences_dir: str = Field(default="assets/licences", description="Static licence files")
    locales_dir: str = Field(default="assets/locales", description="Javascript locale files")

    temp_dir: str = Field(
        default="tempOutputDirectory",
        description="Scratch directory (inside the output directory) for stage 1 output",
    )

    # Directive syntax
    open_marker: str = Field(default="<-", description="Marker opening a directive")
    close_marker: str = Field(default="->", description="Marker closing a directive")

    # Bundle naming
    global_style_name: str = Field(
        default="globalstyle.css", description="File name of the consolidated stylesheet"
    )
    global_script_name: str = Field(
        default="globalscript.js", description="File name of the consolidated script"
    )
    style_uri_prefix: str = Field(default="/", description="Prefix of stylesheet link hrefs")
    script_uri_prefix: str = Field(default="", description="Prefix of script tag srcs")

    # Compilation configuration
    minify_output: bool = Field(
        default=True,
        description="Compress HTML, CSS and Javascript output",
    )

    debug_mode: bool = Field(
        default=False,
        description="Keep the temporary directory after a successful build",
    )

    strict_mode: bool = Field(
        default=False,
        description="Strict mode: treat asset copy warnings as errors",
    )

    def linkTag_make(self, name: str) -> str:
        """
        Generate the stylesheet link tag referencing a file in the style directory.

        Args:
            name: Stylesheet file name (e.g., "globalstyle.css")

        Returns:
            Link tag string

        Example:
            >>> AppSettings().linkTag_make("a.css")
            '<link rel="stylesheet" href="/dist/css/a.css">'
        """
        return f'<link rel="stylesheet" href="{self.style_uri_prefix}{self.styles_dir}/{name}">'

    def scriptTag_make(self, name: str) -> str:
        """
        Generate the script tag referencing a file in the script directory.

        Example:
            >>> AppSettings().scriptTag_make("app.js")
            '<script src="dist/js/app.js"></script>'
        """
        return f'<script src="{self.script_uri_prefix}{self.scripts_dir}/{name}"></script>'


# Singleton instance - import this in your code
appsettings = AppSettings()
