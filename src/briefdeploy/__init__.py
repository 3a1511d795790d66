"""briefdeploy — keep root.txt in sync with the briefings directory and deploy via git.

Layout:
    briefings/                 # Briefing files (dotfiles ignored)
    root.txt                   # key: filename, one per line
    briefdeploy.toml           # Optional config (see briefdeploy.config)
"""
