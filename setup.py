import os
from setuptools import setup

from taskissues import __version__ as version_string


requirements_path = os.path.join(os.path.dirname(__file__), "requirements.txt",)
requirements = []
with open(requirements_path, "r") as in_:
    requirements = [
        req.strip()
        for req in in_.readlines()
        if req.strip() and not req.startswith("-") and not req.startswith("#")
    ]


setup(
    name="taskissues",
    version=version_string,
    url="https://github.com/Vizioz/task-issues",
    description=("Open the GitHub issues referenced by your TODO items."),
    classifiers=[
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
    ],
    python_requires=">=3.10",
    install_requires=requirements,
    extras_require={"test": ["tox", "pytest", "mock"]},
    packages=["taskissues", "taskissues.commands"],
    include_package_data=True,
    entry_points={
        "console_scripts": ["taskissues = taskissues.cmdline:main"],
        "taskissues_commands": [
            "open = taskissues.commands.open:Command",
            "tasks = taskissues.commands.tasks:Command",
            "config = taskissues.commands.config:Command",
            "version = taskissues.commands.version:Command",
        ],
    },
)
