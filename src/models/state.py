"""
Program state model and pipeline helper

Defines ProgramState dataclass for the functional pipeline pattern and
the pipeline() helper for composing transformation stages.
"""

from pathlib import Path
from argparse import Namespace
from typing import Any, Optional, Type, TypeVar, Dict, Callable, TYPE_CHECKING
from dataclasses import dataclass, field

if TYPE_CHECKING:
    from ..config.settings import AppSettings


PS = TypeVar("PS", bound="ProgramState")


@dataclass
class ProgramState:
    """
    Central state container for the build pipeline (state bus pattern).

    This dataclass carries all program state through the functional pipeline,
    with each stage adding new fields as the build progresses.

    Pipeline stages and their state additions:
        - Initial: inputdir, outputdir, verbosity, generate
        - env_check: projectSettings, envOK
        - project_generate: generatedDirs
        - app_compile: compileResult
        - results_report: (no additions, terminal stage)

    Attributes:
        inputdir: Project root holding pages, partials, styles and scripts
        outputdir: Directory receiving the compiled app
        verbosity: Logging verbosity level (1-3)
        generate: Scaffold the project layout instead of compiling
        envOK: Environment validation passed
        projectSettings: Settings with the project's statapp.yaml applied
        generatedDirs: Directories created by project_generate
        compileResult: Build results (status, pages, globals, warnings)
    """

    # CLI arguments
    inputdir: Optional[Path] = field(default=None)
    outputdir: Optional[Path] = field(default=None)
    verbosity: int = field(default=1)
    generate: bool = field(default=False)

    # Pipeline state
    envOK: bool = field(default=False)
    projectSettings: Optional["AppSettings"] = field(default=None)
    generatedDirs: Optional[list] = field(default=None)
    compileResult: Optional[Dict[str, Any]] = field(default=None)

    @classmethod
    def state_createFromNamespace(
        cls: Type["ProgramState"], options: Namespace, inputdir: Path, outputdir: Path
    ) -> "ProgramState":
        """
        Create ProgramState from argparse Namespace and directory paths.

        Args:
            options: Parsed CLI arguments (generate, verbosity)
            inputdir: Project root directory
            outputdir: Directory for build output

        Returns:
            ProgramState instance with all CLI options as attributes
        """
        options_dict = vars(options)

        import dataclasses
        valid_fields = {f.name for f in dataclasses.fields(cls)}

        # Only keep CLI options that are ProgramState fields
        filtered_options = {k: v for k, v in options_dict.items() if k in valid_fields}

        merged_args = {**filtered_options, "inputdir": inputdir, "outputdir": outputdir}

        return cls(**merged_args)

    def copy(self: PS) -> PS:
        """
        Creates a shallow copy of the ProgramState instance.

        Returns:
            A new ProgramState instance.
        """
        return type(self)(**self.__dict__)


def pipeline(
    initial_state: ProgramState, *stages: Callable[[ProgramState], ProgramState]
) -> ProgramState:
    """
    Execute a functional pipeline of state transformations.

    Each stage is a function (ProgramState) -> ProgramState that receives
    the output of the previous stage and returns a new state.

    Args:
        initial_state: Starting ProgramState
        *stages: Variable number of stage functions to execute in order

    Returns:
        Final ProgramState after all transformations

    Example:
        final_state = pipeline(
            initial_state,
            env_check,
            project_generate,
            app_compile,
            results_report
        )
    """
    from functools import reduce
    return reduce(lambda state, stage: stage(state), stages, initial_state)
