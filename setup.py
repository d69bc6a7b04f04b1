"""
Setup script for ielts-locator.

IELTS Reading Locator is a terminal practice tool for the Academic
Reading module. It serves one drill:

1. Generate - Gemini writes a ~1000-word passage and one question
2. Locate - The learner marks the evidence paragraph(s) against a 90s timer
3. Review - Exact-match verdict, answer key and explanation

The 'ielts-locator' command is the primary entry point.
"""

from setuptools import find_packages, setup

setup(
    name="ielts-locator",
    version="1.0.0",
    description="Terminal IELTS Academic Reading evidence-location trainer",
    long_description=open("README.md", encoding="utf-8").read() if __import__("os").path.exists("README.md") else "",
    long_description_content_type="text/markdown",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["config"],
    python_requires=">=3.10",
    install_requires=[
        # CLI
        "typer>=0.9.0",
        "rich>=13.0.0",
        # Config & Validation
        "pydantic>=2.0.0",
        "pydantic-settings>=2.0.0",
        # Content generation
        "google-generativeai>=0.7.0",
        # Logging
        "loguru>=0.7.0",
    ],
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "pytest-asyncio>=0.21.0",
            "pytest-cov>=4.0.0",
            "ruff>=0.1.0",
            "mypy>=1.0.0",
        ],
    },
    entry_points={
        "console_scripts": [
            "ielts-locator=src.cli.locator_cli:main",
        ],
    },
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Education",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Education",
        "Topic :: Education :: Computer Aided Instruction (CAI)",
    ],
    keywords="ielts reading practice cli education",
)
