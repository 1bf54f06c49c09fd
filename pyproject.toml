[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "zerocms"
version = "0.1.0"
description = "Back-end logic for a small CMS admin: roles, menus, departments, their links and data scopes"
requires-python = ">=3.10"
dependencies = [
    "bcrypt",
]
keywords = ["cms", "admin", "rbac", "roles", "departments", "menus"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Dynamic Content :: Content Management System",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[tool.hatch.build.targets.wheel]
packages = ["zerocms"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
