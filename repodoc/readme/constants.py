"""Shared constants for README assembly."""

from __future__ import annotations

from typing import Tuple

SECTION_TITLES: dict[str, str] = {
    "about": "🎯 About",
    "technologies": "🛠️ Technologies",
    "structure": "📁 Project Structure",
    "installation": "📦 Installation",
    "usage": "🚀 Usage",
    "features": "✨ Features",
    "contributing": "🤝 Contributing",
    "license": "📄 License",
    "contact": "📧 Contact",
}

DEFAULT_DESCRIPTION = "A GitHub repository"
ABOUT_FALLBACK = "This project provides various functionalities and features."
TECHNOLOGIES_FALLBACK = "Check repository for details"
LICENSE_FALLBACK = (
    "License information not available. Please check the repository for license details."
)

# First manifest present in the shallow listing selects the install commands.
INSTALL_RULES: Tuple[Tuple[str, str, Tuple[str, ...]], ...] = (
    (
        "package.json",
        "Install dependencies",
        ("npm install", "# or", "yarn install", "# or", "pnpm install"),
    ),
    ("requirements.txt", "Install dependencies", ("pip install -r requirements.txt",)),
    ("pom.xml", "Build the project", ("mvn clean install",)),
    ("Cargo.toml", "Build the project", ("cargo build --release",)),
    ("go.mod", "Download dependencies", ("go mod download",)),
)

USAGE_BODY = """```bash
# Add specific usage instructions here
# Example: npm start, python main.py, etc.
```

For detailed usage instructions, please refer to the project documentation or source code."""

FEATURES_BODY = """- Feature 1: [Describe key feature]
- Feature 2: [Describe key feature]
- Feature 3: [Describe key feature]

*Note: Review the codebase to identify and list specific features*"""

CONTRIBUTING_BODY = """Contributions are welcome! Please follow these steps:

1. Fork the repository
2. Create a new branch (`git checkout -b feature/amazing-feature`)
3. Commit your changes (`git commit -m 'Add some amazing feature'`)
4. Push to the branch (`git push origin feature/amazing-feature`)
5. Open a Pull Request"""

FOOTER = "*Generated by repodoc*"


__all__ = [
    "ABOUT_FALLBACK",
    "CONTRIBUTING_BODY",
    "DEFAULT_DESCRIPTION",
    "FEATURES_BODY",
    "FOOTER",
    "INSTALL_RULES",
    "LICENSE_FALLBACK",
    "SECTION_TITLES",
    "TECHNOLOGIES_FALLBACK",
    "USAGE_BODY",
]
