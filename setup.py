from setuptools import setup, find_packages

setup(
    name="env-editor",
    version="0.1.0",
    packages=find_packages(include=["env_editor", "env_editor.*"]),
    description="Edit process and persisted user environment variables, with PATH-aware append/remove.",
    install_requires=[
        "rich",
        "argcomplete",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "env-editor=env_editor.cli:main",
        ],
    },
    python_requires=">=3.9",
    classifiers=[
        "Programming Language :: Python :: 3",
        "Operating System :: OS Independent",
    ],
)
