"""Prompt templates for code analysis and game development requests."""

from typing import Optional, Tuple

ANALYSIS_TYPES = ("review", "debug", "optimize", "explain", "test")
FRAMEWORKS = ("threejs", "typescript", "vite", "cannon-js")
REQUEST_TYPES = ("implement", "fix", "improve", "design")

ANALYSIS_TEMPERATURE = 0.3
GAME_DEV_TEMPERATURE = 0.4

_ANALYSIS_PROMPTS = {
    "review": """Please review this {language} code and provide feedback on:
- Code quality and best practices
- Potential bugs or issues
- Suggestions for improvement
- Security considerations""",
    "debug": """Please help debug this {language} code:
- Identify potential bugs or errors
- Explain what might be causing issues
- Suggest specific fixes""",
    "optimize": """Please analyze this {language} code for optimization:
- Performance improvements
- Memory usage optimization
- Algorithm efficiency
- Best practices for the specific language/framework""",
    "explain": """Please explain this {language} code:
- What does it do?
- How does it work?
- Key concepts and patterns used
- Flow of execution""",
    "test": """Please suggest tests for this {language} code:
- Unit test cases
- Edge cases to consider
- Testing strategies
- Mock data if needed""",
}

FRAMEWORK_CONTEXT = {
    "threejs": "Three.js 3D graphics library with WebGL",
    "typescript": "TypeScript with strict type checking",
    "vite": "Vite build tool and development server",
    "cannon-js": "Cannon.js physics engine for 3D physics simulation",
}

_REQUEST_PROMPTS = {
    "implement": """Please help implement {feature} using {framework}. Provide:
- Complete code implementation
- Explanation of approach
- Integration steps
- Best practices""",
    "fix": """Please help fix issues with {feature} in {framework}. Provide:
- Problem analysis
- Root cause identification
- Specific fixes
- Prevention strategies""",
    "improve": """Please help improve {feature} built with {framework}. Provide:
- Enhancement suggestions
- Performance optimizations
- Code quality improvements
- Modern best practices""",
    "design": """Please help design {feature} for {framework}. Provide:
- Architecture recommendations
- Design patterns to use
- Implementation strategy
- Considerations and trade-offs""",
}


def _check_choice(kind: str, value: str, allowed) -> None:
    if value not in allowed:
        raise ValueError(f"Invalid {kind}: {value}. Expected one of: {', '.join(allowed)}")


def build_code_analysis_prompt(
    code: str,
    language: str,
    analysis_type: str,
    context: Optional[str] = None,
) -> Tuple[str, str]:
    """
    Returns:
        (system_message, user_prompt)
    """
    _check_choice("analysis_type", analysis_type, ANALYSIS_TYPES)

    system_message = f"You are an expert {language} developer providing {analysis_type} assistance."
    context_block = f"Context: {context}\n" if context else ""
    prompt = (
        f"{_ANALYSIS_PROMPTS[analysis_type].format(language=language)}\n\n"
        f"{context_block}\n"
        f"Code to analyze:\n"
        f"```{language}\n{code}\n```"
    )
    return system_message, prompt


def build_game_dev_prompt(
    feature: str,
    framework: str,
    request_type: str,
    current_code: Optional[str] = None,
    context: Optional[str] = None,
) -> Tuple[str, str]:
    """
    Returns:
        (system_message, user_prompt)
    """
    _check_choice("framework", framework, FRAMEWORKS)
    _check_choice("request_type", request_type, REQUEST_TYPES)

    description = FRAMEWORK_CONTEXT[framework]
    system_message = (
        f"You are an expert game developer specializing in {description}. \n"
        "Focus on practical, working solutions for 3D racing games similar to Mario Kart."
    )

    context_block = f"Project Context: {context}\n" if context else ""
    code_block = f"Current Implementation:\n```typescript\n{current_code}\n```\n" if current_code else ""
    prompt = (
        f"{_REQUEST_PROMPTS[request_type].format(feature=feature, framework=framework)}\n\n"
        f"Framework: {framework} ({description})\n"
        f"{context_block}\n"
        f"{code_block}\n"
        "Please provide detailed, actionable guidance."
    )
    return system_message, prompt


__all__ = [
    "ANALYSIS_TYPES",
    "FRAMEWORKS",
    "REQUEST_TYPES",
    "ANALYSIS_TEMPERATURE",
    "GAME_DEV_TEMPERATURE",
    "FRAMEWORK_CONTEXT",
    "build_code_analysis_prompt",
    "build_game_dev_prompt",
]
