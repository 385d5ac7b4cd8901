"""CLI Commands"""

import os
import sys

from commit_gen.config import ConfigManager, load_config, save_config, get_config_path
from commit_gen.output import bold, dim, info, print_success


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no {ConfigManager.CONFIG_FILENAME} found)")

    env_provider = os.environ.get('CG_PROVIDER')
    env_model = os.environ.get('CG_MODEL')
    if env_provider or env_model:
        print(f"  {dim('Environment overrides:')}")
        if env_provider:
            print(f"    CG_PROVIDER={env_provider}")
        if env_model:
            print(f"    CG_MODEL={env_model}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    provider:     {info(config.provider)}")
    print(f"    model:        {info(config.model or 'auto')}")
    print(f"    command:      {info(config.command)}")
    print(f"    commit_type:  {info(config.commit_type)}")
    print(f"    language:     {info(config.language)}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  {ConfigManager.CONFIG_FILENAME} (in current directory)")
    print(f"    Global: ~/{ConfigManager.CONFIG_FILENAME}")
    print(f"\n  {dim('Run')} commit-gen --init-config {dim('to write one here')}\n")

    return 0


def run_init_config() -> int:
    """Write the effective configuration to the current directory."""
    path = save_config(load_config(), global_config=False)
    print_success(f"Saved to {path}")
    return 0


def run_install_completion() -> int:
    """Install shell tab completion."""
    shell = os.environ.get('SHELL', '')
    line = 'eval "$(register-python-argcomplete commit-gen)"'

    print(f"\n{bold('Tab Completion Setup')}\n")

    if 'zsh' in shell or 'bash' in shell:
        rc_file = os.path.expanduser('~/.zshrc' if 'zsh' in shell else '~/.bashrc')
        print(f"Add this line to {dim(rc_file)}:\n")
        print(f"  {line}\n")
        print(f"Then run: {dim('source ' + rc_file)}")
    elif sys.platform == 'win32':
        print("For PowerShell, run:\n")
        print("  register-python-argcomplete --shell powershell commit-gen | Out-String | Invoke-Expression\n")
    else:
        print("Run one of these based on your shell:\n")
        print(f"  {dim('# Bash/Zsh')}")
        print(f"  {line}\n")
        print(f"  {dim('# Fish')}")
        print("  register-python-argcomplete --shell fish commit-gen | source")

    print(f"\n{dim('After setup, press TAB to autocomplete flags.')}")
    return 0
