#!/usr/bin/env python3
"""
statapp - Static app compiler

Builds a static HTML application from a project directory of page fragments,
partials, stylesheets and scripts.

As an aside, this codebase leverages the ChRIS "plugin" concept/pattern as
general purpose python app development framework.

Directives are written inside pages between markers:

    <- partial(header.html) ->     inline a partial
    <- style(common.css) ->        include a stylesheet
    <- script(app.js, 10) ->       include a script with sort order 10

Stylesheets and scripts used by every page are merged into one global
stylesheet and one global script; the others are compressed on their own.

Usage:
    statapp projectdir/ outputdir/

Examples:
    # Create the directory layout of a new project
    statapp myproject/ app/ --generate

    # Compile the project
    statapp myproject/ app/

    # Verbose output
    statapp myproject/ app/ -vv
"""

import sys
from pathlib import Path
from argparse import ArgumentParser, Namespace, ArgumentDefaultsHelpFormatter

from chris_plugin import chris_plugin
from .lib import AppCompiler, AppGenerator, __version__, LOG, state_connectToLogger
from .lib.errors import StatAppError
from .config import settings_forProject
from .models import ProgramState, pipeline


DISPLAY_TITLE = r"""
      _        _
  ___| |_ __ _| |_ __ _ _ __  _ __
 / __| __/ _` | __/ _` | '_ \| '_ \
 \__ \ || (_| | || (_| | |_) | |_) |
 |___/\__\__,_|\__\__,_| .__/| .__/
                       |_|   |_|
  Static app compiler
"""

# Define CLI arguments
parser = ArgumentParser(
    description="statapp - Static app compiler with partials and bundled styles/scripts",
    formatter_class=ArgumentDefaultsHelpFormatter,
)

parser.add_argument(
    "--generate",
    action="store_true",
    default=False,
    help="Create the project directory layout in inputdir instead of compiling",
)

parser.add_argument(
    "-v",
    "--verbosity",
    action="count",
    default=1,
    help="Increase output verbosity (can be repeated: -v, -vv, -vvv)",
)

parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")


def env_check(inputstate: ProgramState) -> ProgramState:
    """
    Validate the project directory and load its settings.

    Args:
        inputstate: Initial program state with CLI options

    Returns:
        ProgramState with added fields:
            - projectSettings: settings with statapp.yaml overrides
            - envOK: True if environment is valid

    Exits:
        1 if the project directory is missing or its statapp.yaml is invalid
    """
    state = inputstate.copy()

    if state.verbosity >= 2:
        LOG(DISPLAY_TITLE, level=2)

    LOG("Checking environment...", level=2)

    if state.generate:
        state.inputdir.mkdir(parents=True, exist_ok=True)

    if not state.inputdir.is_dir():
        print(f"Error: Project directory not found: {state.inputdir}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)
    LOG(f"Project directory: {state.inputdir}", level=2)

    try:
        state.projectSettings = settings_forProject(state.inputdir)
    except StatAppError as e:
        print(f"Error: {e}", file=sys.stderr)
        state.envOK = False
        sys.exit(1)

    LOG(f"Output directory: {state.outputdir}", level=2)
    state.envOK = True
    return state


def project_generate(inputstate: ProgramState) -> ProgramState:
    """
    Create the project layout when --generate was given.

    Returns:
        ProgramState with added field:
            - generatedDirs: directories created (None when not generating)

    Exits:
        1 if a directory cannot be created
    """
    state = inputstate.copy()
    if not state.generate:
        return state

    LOG("Generating project layout...", level=1)
    try:
        state.generatedDirs = AppGenerator(state.inputdir, state.projectSettings).generate()
    except StatAppError as e:
        print(f"Generation error: {e}", file=sys.stderr)
        sys.exit(1)
    return state


def app_compile(inputstate: ProgramState) -> ProgramState:
    """
    Compile the project into the output directory.

    Returns:
        ProgramState with added field:
            - compileResult: Dict containing:
                - status: bool (compilation success)
                - output_dir: str
                - pages: list of compiled page names
                - global_styles / global_scripts: bundled resources
                - warnings: asset copy warnings

    Exits:
        1 if any stage fails
    """
    state = inputstate.copy()
    if state.generate:
        return state

    LOG("Compiling app...", level=1)
    try:
        compiler = AppCompiler(
            project_dir=state.inputdir,
            output_dir=state.outputdir,
            settings=state.projectSettings,
        )
        state.compileResult = compiler.compile()
        LOG(f"Compilation complete: {len(state.compileResult['pages'])} pages", level=2)
    except StatAppError as e:
        print(f"Compilation error: {e}", file=sys.stderr)
        if state.verbosity >= 3:
            import traceback

            traceback.print_exc()
        sys.exit(1)

    return state


def results_report(inputstate: ProgramState) -> ProgramState:
    """
    Display build results to the user.

    Returns:
        ProgramState unchanged (terminal pipeline stage)

    Exits:
        1 if neither a project was generated nor an app compiled
    """
    state: ProgramState = inputstate.copy()
    if state.generate:
        LOG(f"\n✓ Project layout ready in {state.inputdir}", level=1)
        for path in state.generatedDirs or []:
            LOG(f"  created {path}", level=2)
        return state

    if not state.compileResult:
        print("Error: Compilation failed", file=sys.stderr)
        sys.exit(1)

    LOG("\n✓ Compilation successful!", level=1)
    LOG(f"  Output: {state.compileResult['output_dir']}", level=1)
    LOG(f"  Pages: {len(state.compileResult['pages'])}", level=1)
    LOG(f"  Global styles: {', '.join(state.compileResult['global_styles']) or '-'}", level=1)
    LOG(f"  Global scripts: {', '.join(state.compileResult['global_scripts']) or '-'}", level=1)
    if state.compileResult['warnings']:
        LOG(f"  Warnings: {len(state.compileResult['warnings'])}", level=1)
    return state


@chris_plugin(
    parser=parser,
    title="statapp - Static app compiler",
    category="Utility",
    min_memory_limit="100Mi",
    min_cpu_limit="500m",
)
def main(options: Namespace, inputdir: Path, outputdir: Path):
    """
    Main entry point - compile a statapp project to a static app.

    Orchestrates the full pipeline:
        1. env_check: Validate project directory, load statapp.yaml
        2. project_generate: Create project layout (--generate only)
        3. app_compile: Run partial, style and script stages
        4. results_report: Display results to user

    Args:
        options: CLI arguments from argparse
            - generate: bool - Scaffold instead of compiling
            - verbosity: int - Logging verbosity level (1-3)
        inputdir: Project root directory
        outputdir: Directory where the compiled app will be written

    Note:
        This function is wrapped by @chris_plugin which handles CLI
        argument parsing and invokes this function with parsed values.
    """

    state: ProgramState = ProgramState.state_createFromNamespace(
        options=options, inputdir=inputdir, outputdir=outputdir
    )

    # Connect state to logger for entire pipeline
    state_connectToLogger(state)

    pipeline(state, env_check, project_generate, app_compile, results_report)


if __name__ == "__main__":
    main()  # type: ignore  # @chris_plugin decorator transforms signature
