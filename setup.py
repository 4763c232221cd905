from pathlib import Path
from setuptools import find_packages, setup


def read_requirements() -> list[str]:
    req_path = Path(__file__).parent / "requirements.txt"
    if not req_path.exists():
        return []
    return [line.strip() for line in req_path.read_text(encoding="utf-8").splitlines() if line.strip() and not line.startswith("#")]


setup(
    name="hireshield",
    version="0.1.0",
    description="Risk scoring and remediation tracking for AI-hiring compliance",
    packages=find_packages(include=["hireshield", "hireshield.*"]),
    install_requires=read_requirements(),
    extras_require={"test": ["pytest>=7.4"]},
    entry_points={"console_scripts": ["hireshield-audit=hireshield.scripts.run_audit:main"]},
    python_requires=">=3.10",
    include_package_data=True,
)
