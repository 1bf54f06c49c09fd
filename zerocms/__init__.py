"""Back-end logic for a small CMS admin: roles, menus, departments, their links and data scopes."""

__version__ = "0.1.0"