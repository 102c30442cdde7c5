[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "kata"
version = "0.1.0"
description = "Small worked exercises: numeric helpers, parsers, a protobuf decoder, text widgets, concurrency demos and a websocket chat"
requires-python = ">=3.10"
keywords = [
    "exercises",
    "education",
    "parser",
    "protobuf",
    "dining-philosophers",
    "link-checker",
    "websocket-chat",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Operating System :: OS Independent",
    "Topic :: Education",
]
dependencies = [
    "requests",
    "beautifulsoup4",
    "websockets",
]

[project.optional-dependencies]
test = [
    "pytest",
    "pytest-asyncio",
    "responses",
]

[project.scripts]
kata-packages = "kata.packages:main"
kata-parse = "kata.expression_parser:main"
kata-protobuf = "kata.protobuf:main"
kata-rot = "kata.rot:main"
kata-widgets = "kata.widgets:main"
kata-verbosity = "kata.verbosity:main"
kata-ls = "kata.directory:main"
kata-philosophers = "kata.philosophers:main"
kata-async-philosophers = "kata.async_philosophers:main"
kata-check-links = "kata.link_checker:main"
kata-chat-server = "kata.chat_server:main"
kata-chat-client = "kata.chat_client:main"

[tool.hatch.build.targets.wheel]
packages = ["kata"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 88
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
