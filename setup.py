from setuptools import find_packages, setup
from pathlib import Path

# Function to read dependencies from requirements.txt
def load_requirements(filename_req="requirements.txt"):
    requirements_path = Path(__file__).resolve().parent / filename_req
    if not requirements_path.exists():
        print(f"Warning: '{filename_req}' not found at {requirements_path}. Using a fallback list of dependencies for setup.py.")
        # This fallback should match requirements.txt
        return [
            "pydantic>=2.7,<3",
            "python-dotenv>=1.0",
            "loguru>=0.7",
            "httpx>=0.27",
            "beautifulsoup4>=4.12",
        ]
    with open(requirements_path, "r", encoding="utf-8") as f:
        return [line.strip() for line in f if line.strip() and not line.startswith("#")]

readme_path = Path(__file__).resolve().parent / "README.md"
if readme_path.exists():
    with open(readme_path, "r", encoding="utf-8") as fh:
        long_description = fh.read()
else:
    long_description = "serpscrape - fetch a Google result page and extract its organic results (URL, title, snippet)."

setup(
    name="serpscrape",
    version="0.1.0",
    author="serpscrape contributors",
    description="serpscrape: a single-query Google result scraper with layout-tolerant result extraction.",
    long_description=long_description,
    long_description_content_type="text/markdown",

    packages=find_packages(exclude=["*.tests", "*.tests.*", "tests.*", "tests", "config"]),
    py_modules=["main"],

    install_requires=load_requirements("requirements.txt"),
    extras_require={
        "test": [
            "pytest>=8.0",
            "pytest-asyncio>=0.23",
        ],
    },

    python_requires=">=3.11",

    entry_points={
        "console_scripts": [
            "serpscrape=main:main",
        ],
    },

    classifiers=[
        "Development Status :: 3 - Alpha",
        "Intended Audience :: Developers",
        "Topic :: Internet :: WWW/HTTP :: Indexing/Search",
        "Topic :: Text Processing :: Markup :: HTML",
        "License :: OSI Approved :: MIT License",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Programming Language :: Python :: 3.13",
        "Operating System :: OS Independent",
    ],
    keywords="google search scraper serp html extraction",
    include_package_data=True,
)
