#!/usr/bin/env python3
"""
Setup script for bioctl for environments that install with plain setuptools.
"""

import sys

from setuptools import find_packages, setup

# Read the pyproject.toml to get the package metadata
try:
    import tomllib

    with open("pyproject.toml", "rb") as f:
        pyproject_data = tomllib.load(f)

    poetry = pyproject_data["tool"]["poetry"]

    # Get dependencies
    install_requires = []
    test_requires = []
    for dep, version_spec in poetry["dependencies"].items():
        if dep == "python":
            continue
        if isinstance(version_spec, str):
            install_requires.append(f"{dep}{version_spec}")
        elif version_spec.get("optional"):
            test_requires.append(f"{dep}{version_spec['version']}")
        else:
            install_requires.append(f"{dep}{version_spec['version']}")

    scripts = [f"{name}={target}" for name, target in poetry.get("scripts", {}).items()]

    setup(
        name=poetry["name"],
        version=poetry["version"],
        description=poetry["description"],
        author=poetry["authors"][0],
        license=poetry["license"],
        packages=find_packages(where="src"),
        package_dir={"": "src"},
        install_requires=install_requires,
        extras_require={"test": test_requires},
        entry_points={"console_scripts": scripts},
        python_requires=">=3.11,<4.0",
        include_package_data=True,
        zip_safe=False,
    )

except Exception as e:
    print(f"Error reading pyproject.toml: {e}")
    sys.exit(1)
