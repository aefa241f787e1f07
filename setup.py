from setuptools import find_namespace_packages, setup
from setuptools.command.install import install


class CustomInstallCommand(install):
    def run(self):
        install.run(self)
        print("\nInstallation complete!")
        print("Run the following command to see the options of the command-line tool:")
        print("cmdopt --help\n")


setup(
    name="cmdopt-utils",
    version="1.0.0",
    description="Getopt-style command-line option parsing with short, long, and grouped options.",
    python_requires=">=3.8",
    package_dir={"": "src"},
    packages=find_namespace_packages(where="src", include=["cmdopt_utils", "cmdopt_utils.*"]),
    install_requires=[
        "pyyaml>=6.0",
        "termcolor>=2.0"
    ],
    extras_require={
        "test": [
            "pytest>=7.0"
        ]
    },
    entry_points={
        "console_scripts": [
            "cmdopt=cmdopt_utils.cli:main"
        ]
    },
    cmdclass={
        "install": CustomInstallCommand
    }
)
