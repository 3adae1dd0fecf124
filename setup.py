from setuptools import setup, find_packages

setup(
    name="uttt-solver",
    version="0.1.0",
    description="Exact depth-limited solver for Ultimate Tic-Tac-Toe with a tiered result cache",
    packages=find_packages(include=["game", "game.*", "solver", "solver.*", "utils", "utils.*"]),
    py_modules=["config", "solve_games"],
    python_requires=">=3.9",
    install_requires=[
        "numpy",
        "tqdm",
    ],
    extras_require={
        "test": ["pytest"],
    },
    entry_points={
        "console_scripts": [
            "solve-games=solve_games:main",
        ],
    },
)
