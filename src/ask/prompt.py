"""Prompt construction for ask."""

from ask.constants import CLARIFY_SENTINEL, EXPLAIN_SENTINEL
from ask.models import EnvironmentSnapshot, ExplainRequest, GenerateRequest, PromptRequest
from ask.models.environment import UNAVAILABLE

GENERATE_ROLE = "You are Ask, a CLI helper that returns shell commands or very short explanations."
EXPLAIN_ROLE = "You are Ask, a CLI helper that explains shell commands in plain language."

# Behavioral contract with the model. ask.response relies on the sentinels.
GUIDELINES = (
    "1) Prefer a single concise command. If multiple steps are really necessary, "
    "put each command on its own line.",
    '2) Do not add introductions like "Here is the command"; '
    "output only commands or a one-line explanation.",
    "3) If a command is potentially destructive (rm, find -delete, mass changes), "
    f"add a single comment line after it starting with '{EXPLAIN_SENTINEL}'.",
    '4) If the user asks a conceptual question (for example: "what is ls"), '
    "return a one-sentence answer instead of a command.",
    "5) If the request is ambiguous, respond with a single clarifying question "
    f"starting with '{CLARIFY_SENTINEL}'.",
)

EXPLAIN_TASK = (
    "Explain what the following command does, part by part, in a few short sentences. "
    "If it can delete or overwrite data, add a single line starting with "
    f"'{EXPLAIN_SENTINEL}' that describes the risk."
)


def _environment_lines(env: EnvironmentSnapshot) -> list[str]:
    """Render every populated snapshot field as a ``- key: value`` line."""
    lines = [
        f"- platform: {env.platform}",
        f"- shell: {env.shell}",
        f"- cwd: {env.cwd}",
    ]
    if env.user is not None:
        lines.insert(2, f"- user: {env.user}")

    if env.vcs is not None:
        lines.append(f"- git_repo: {'yes' if env.vcs.is_repository else 'no'}")
        if env.vcs.branch:
            lines.append(f"- git_branch: {env.vcs.branch}")
        if env.vcs.recent_status_lines:
            lines.append("- git_status:")
            lines.extend(f"    {line}" for line in env.vcs.recent_status_lines)

    if not env.files_available:
        lines.append(f"- files_sample: {UNAVAILABLE}")
    elif env.files:
        sample = ", ".join(env.files)
        if env.files_truncated:
            sample += ", ..."
        lines.append(f"- files_sample: {sample}")

    if env.tools:
        lines.append(f"- tools_available: {', '.join(env.tools)}")

    if env.project is not None:
        if env.project.stack:
            lines.append(f"- project_stack: {env.project.stack}")
        if env.project.package_manager:
            lines.append(f"- package_manager: {env.project.package_manager}")
        if env.project.tags:
            lines.append(f"- project_tags: {', '.join(env.project.tags)}")

    return lines


def build_generate_prompt(question: str, env: EnvironmentSnapshot) -> str:
    return "\n".join(
        [
            GENERATE_ROLE,
            "",
            "Environment:",
            *_environment_lines(env),
            "",
            "Guidelines:",
            *GUIDELINES,
            "",
            "User request:",
            question,
            "",
            "Answer:",
        ]
    )


def build_explain_prompt(command_text: str, env: EnvironmentSnapshot) -> str:
    return "\n".join(
        [
            EXPLAIN_ROLE,
            "",
            "Environment:",
            f"- platform: {env.platform}",
            f"- shell: {env.shell}",
            f"- cwd: {env.cwd}",
            "",
            EXPLAIN_TASK,
            "",
            "Command:",
            command_text,
            "",
            "Answer:",
        ]
    )


def build_prompt(request: PromptRequest, env: EnvironmentSnapshot) -> str:
    """Render the instruction string for a request."""
    if isinstance(request, ExplainRequest):
        return build_explain_prompt(request.command_text, env)
    if isinstance(request, GenerateRequest):
        return build_generate_prompt(request.question, env)
    raise TypeError(f"unsupported request: {type(request).__name__}")
