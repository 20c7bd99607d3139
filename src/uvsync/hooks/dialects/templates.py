# File: src/uvsync/hooks/dialects/templates.py
"""
Hook text for each shell dialect.

Templates use `{name}` placeholders filled by `fill_placeholders()`:

    {start} {end}          marker lines
    {condition}            "should the target follow the prefix?" test
    {function_name} {prefix_var} {env_name_var} {target_var} {base_env_name}

Any other braces are shell syntax and are left untouched.

Every hook implements the same rule: while the condition holds, export the
target variable equal to the prefix (only when it differs); otherwise unset
the target variable if it is set.
"""

from __future__ import annotations

from dataclasses import dataclass

from uvsync.hooks.base.string_helpers import dedent, fill_placeholders, strip_bounding_blank_lines
from uvsync.hooks.blocks.marked_block import MarkerPair
from uvsync.hooks.dialects.model import SyncVariables


@dataclass(frozen=True, slots=True)
class HookTemplate:
    """A hook body plus the two flavors of its activation condition."""

    body: str
    condition: str
    base_guard: str  # used instead of `condition` when the base environment is ignored

    def render(self, markers: MarkerPair, variables: SyncVariables, ignore_base: bool) -> str:
        values: dict[str, str] = {
            **variables.placeholders(),
            "start": markers.start,
            "end": markers.end,
        }
        values["condition"] = fill_placeholders(self.base_guard if ignore_base else self.condition, values)
        return strip_bounding_blank_lines(fill_placeholders(dedent(self.body), values)) + "\n"


BASH = HookTemplate(
    body="""
        {start}
        {function_name}() {
          if {condition}; then
            if [ "${target_var}" != "${prefix_var}" ]; then
              export {target_var}="${prefix_var}"
            fi
          elif [ -n "${target_var}" ]; then
            unset {target_var}
          fi
        }
        case ";${PROMPT_COMMAND};" in
          *";{function_name};"*) ;;
          *) PROMPT_COMMAND="{function_name}${PROMPT_COMMAND:+;$PROMPT_COMMAND}" ;;
        esac
        {end}
    """,
    condition='[ -n "${prefix_var}" ]',
    base_guard='[ -n "${prefix_var}" ] && [ "${env_name_var}" != "{base_env_name}" ]',
)

ZSH = HookTemplate(
    body="""
        {start}
        {function_name}() {
          if {condition}; then
            if [[ "${target_var}" != "${prefix_var}" ]]; then
              export {target_var}="${prefix_var}"
            fi
          elif [[ -n "${target_var}" ]]; then
            unset {target_var}
          fi
        }
        autoload -Uz add-zsh-hook
        add-zsh-hook precmd {function_name}
        {end}
    """,
    condition='[[ -n "${prefix_var}" ]]',
    base_guard='[[ -n "${prefix_var}" && "${env_name_var}" != "{base_env_name}" ]]',
)

FISH = HookTemplate(
    body="""
        {start}
        function {function_name} --on-event fish_preexec
            if {condition}
                if not set -q {target_var}; or test "${target_var}" != "${prefix_var}"
                    set -gx {target_var} "${prefix_var}"
                end
            else if set -q {target_var}
                set -e {target_var}
            end
        end
        {end}
    """,
    condition="set -q {prefix_var}",
    base_guard='set -q {prefix_var}; and test "${env_name_var}" != "{base_env_name}"',
)

ELVISH = HookTemplate(
    body="""
        {start}
        set edit:before-readline = [ $@edit:before-readline {
            if {condition} {
                if (or (not (has-env {target_var})) (!=s $E:{target_var} $E:{prefix_var})) {
                    set-env {target_var} $E:{prefix_var}
                }
            } elif (has-env {target_var}) {
                unset-env {target_var}
            }
        } ]
        {end}
    """,
    condition="(has-env {prefix_var})",
    base_guard="(and (has-env {prefix_var}) (!=s $E:{env_name_var} {base_env_name}))",
)

POWERSHELL = HookTemplate(
    body="""
        {start}
        function global:{function_name} {
            if ({condition}) {
                if ($env:{target_var} -ne $env:{prefix_var}) {
                    $env:{target_var} = $env:{prefix_var}
                }
            } elseif (Test-Path Env:{target_var}) {
                Remove-Item Env:{target_var}
            }
        }
        if (-not $global:_UvCondaHookInstalled) {
            $global:_UvCondaHookInstalled = $true
            $global:_UvCondaOriginalPrompt = $function:prompt
            function global:prompt {
                {function_name}
                & $global:_UvCondaOriginalPrompt
            }
        }
        {end}
    """,
    condition="$env:{prefix_var}",
    base_guard="$env:{prefix_var} -and $env:{env_name_var} -ne '{base_env_name}'",
)


# End of file: src/uvsync/hooks/dialects/templates.py
