from setuptools import setup, find_packages

with open("README.md", "r", encoding="utf-8") as fh:
    long_description = fh.read()

setup(
    name="periodformat",
    version="0.1.0",
    author="Peter Cotton",
    author_email="",
    description="Text formats for calendar periods (years, semesters, quarters, months, weeks, days)",
    long_description=long_description,
    long_description_content_type="text/markdown",
    url="https://github.com/petercotton/periodformat",
    packages=find_packages(include=["periodformat", "periodformat.*"]),
    include_package_data=True,
    package_data={
        '': ['locales/data/*.yaml'],
    },
    classifiers=[
        "Programming Language :: Python :: 3",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
    ],
    python_requires=">=3.8",
    install_requires=[
        "pandas>=1.3.0",
        "rapidfuzz>=2.0.0",
        "PyYAML>=5.4",
        "isoweek>=1.3.3",
    ],
    extras_require={
        "dev": ["pytest>=7.0.0"],
    },
)
