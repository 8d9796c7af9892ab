"""Document Renderer - Build the pre-filled PR markdown template."""

from prsummary.analysis.categorizer import Category, FileCategories
from prsummary.analysis.classifier import PRType
from prsummary.analysis.complexity import ComplexityReport

# Files shown per category before collapsing into "...and N more"
CHANGES_PER_CATEGORY = 5
LISTED_PER_CATEGORY = 10

_BUG_SECTION = """\
### Reproduction Steps

<!-- Exact steps to reproduce the issue -->
1. Step 1
2. Step 2
3. **Result**: What happens (error, unexpected behavior)

### Root Cause

<!-- Explain the technical reason for the bug -->
<!-- Optional: Add ASCII diagram showing the problem flow -->

```text
Step 1
  ↓
Step 2
  ↓
Problem occurs 🔄
```"""

_VISUAL_FLOW = """\
### Visual Flow (optional)

```text
┌─────────────────────────────────────┐
│ Component Flow                      │
├─────────────────────────────────────┤
│ 1. User action                      │
│ 2. State update ← Change here       │
│ 3. Re-render                        │
└─────────────────────────────────────┘
```"""

_ALTERNATIVES = """\
### Alternative Solutions Considered (if applicable)

| Solution | Result |
|----------|--------|
| Option 1 | ❌ Why it didn't work |
| **Chosen Solution** | ✅ **Why this is best** |"""

_TESTING = """\
## Testing

### Test Matrix

| Test Case | Setup | Expected Result | Verified |
|-----------|-------|-----------------|----------|
| Primary scenario | <!-- Setup details --> | <!-- Expected outcome --> | ✅ |
| Edge case 1 | <!-- Setup details --> | <!-- Expected outcome --> | ✅ |
| Edge case 2 | <!-- Setup details --> | <!-- Expected outcome --> | ✅ |

### Regression Testing (CRITICAL!)

**Verify NO existing functionality is broken:**

- [ ] All features that use the changed code still work
- [ ] Related components/pages render correctly
- [ ] No new console errors introduced
- [ ] Existing tests still pass
- [ ] No broken imports or dependencies

**Specific checks performed:**
<!-- List the specific features/flows you tested -->

### Automated Tests

- [ ] Unit tests added/updated
- [ ] Integration tests added/updated
- [ ] All tests passing"""

_IMPACT_CHECKLISTS = """\
### Breaking Changes

- [ ] No breaking changes
- [ ] Has breaking changes (describe below)

<!-- If breaking changes, list them and migration steps -->

### Performance Impact

- [ ] No performance impact
- [ ] Performance improved
- [ ] Performance degraded (explain below)

<!-- If performance impact, describe it -->

### Accessibility Impact

- [ ] No accessibility changes
- [ ] Accessibility improved
- [ ] Accessibility affected (explain below)

<!-- If accessibility impact, describe it -->

### Backward Compatibility

- [ ] ✅ Fully backward compatible
- [ ] ⚠️ Requires migration (describe below)

<!-- If migration needed, provide steps -->"""

_DEPLOYMENT = """\
## Deployment

### Deployment Safety

- ✅ Safe to deploy immediately / ⚠️ Requires coordination

### Requirements

- [ ] No database migrations needed
- [ ] No environment variable changes
- [ ] No API contract changes
- [ ] No infrastructure changes"""

_UI_CHECKS = """\
- [ ] Tested on multiple browsers (if UI change)
- [ ] Tested on mobile (if responsive change)
- [ ] Tested with screen reader (if a11y change)"""

_RELATED_ISSUES = """\
## Related Issues

Closes #issue_number
Related to #issue_number"""

_RULE = "---"


class DocumentRenderer:
    """Renders the markdown PR summary. Output depends only on the inputs."""

    def render(
        self,
        pr_type: PRType,
        commits: list[str],
        categories: FileCategories,
        report: ComplexityReport,
        suggestions: list[str],
    ) -> str:
        has_components = bool(categories[Category.COMPONENTS])
        sections = [
            self._build_title(pr_type),
            self._build_problem_section(pr_type),
            _RULE,
            self._build_solution_section(categories),
            _RULE,
            self._build_technical_section(has_components),
            _RULE,
            _TESTING,
            _RULE,
            self._build_impact_section(report),
            _RULE,
            _DEPLOYMENT,
            _RULE,
            self._build_checklist(has_components),
            _RULE,
            _RELATED_ISSUES,
            _RULE,
            self._build_notes_section(commits, categories, suggestions),
            _RULE,
            self._build_metadata(pr_type, report),
        ]
        return "\n\n".join(filter(None, sections)) + "\n"

    def _build_title(self, pr_type: PRType) -> str:
        return f"""# {pr_type.icon} {pr_type.label}: [Brief Description]

<!-- TODO: Add a clear, concise title describing the change -->"""

    def _build_problem_section(self, pr_type: PRType) -> str:
        parts = [
            "## Problem Statement",
            "<!-- TODO: Describe the issue or requirement that prompted this PR -->",
        ]
        if pr_type.label == 'Fix':
            parts.append(_BUG_SECTION)
        return "\n\n".join(parts)

    def _build_solution_section(self, categories: FileCategories) -> str:
        return f"""## Solution

<!-- TODO: High-level description of your approach -->

### Why This Works

<!-- Before/After comparison explaining the mechanism -->
- **Before**: <!-- What was happening -->
- **After**: <!-- How the fix changes behavior -->

### Changes Made

{self.build_changes(categories)}"""

    def build_changes(self, categories: FileCategories) -> str:
        """Per-category file stubs, at most CHANGES_PER_CATEGORY files each."""
        blocks = []
        for category, files in categories.non_empty():
            lines = [f"#### {category.label}", ""]
            for path in files[:CHANGES_PER_CATEGORY]:
                lines.extend([
                    f"**`{path}`**",
                    "",
                    "<!-- TODO: Describe changes in this file -->",
                    "- Change description",
                    "",
                ])
            hidden = len(files) - CHANGES_PER_CATEGORY
            if hidden > 0:
                lines.extend([f"_...and {hidden} more files_", ""])
            blocks.append("\n".join(lines).rstrip())

        return "\n\n".join(blocks) or "<!-- TODO: Describe your changes -->"

    def _build_technical_section(self, has_components: bool) -> str:
        parts = [
            "## Technical Details",
            "### Implementation\n\n```typescript\n// TODO: Add key code snippet showing the solution\n```",
        ]
        if has_components:
            parts.append(_VISUAL_FLOW)
        parts.append(_ALTERNATIVES)
        return "\n\n".join(parts)

    def _build_impact_section(self, report: ComplexityReport) -> str:
        scope = (
            f"**Files Modified**: {report.file_count} files, "
            f"+{report.total_added} lines, -{report.total_removed} lines"
        )
        return f"""## Impact Analysis

### Scope

{scope}

**Affected Flows**: <!-- List the user flows or systems affected -->

{_IMPACT_CHECKLISTS}"""

    def _build_checklist(self, has_components: bool) -> str:
        testing = [
            "**Testing:**",
            "- [ ] **Regression testing completed - NO existing functionality broken**",
            "- [ ] All automated tests passing",
        ]
        if has_components:
            testing.append(_UI_CHECKS)

        return "\n\n".join([
            "## Checklist",
            "\n".join([
                "**Code Quality:**",
                "- [ ] Code follows project style guidelines",
                "- [ ] Self-review completed",
                "- [ ] Comments added for complex logic",
                "- [ ] No console.log or debug code left",
            ]),
            "\n".join(testing),
            "\n".join([
                "**Documentation:**",
                "- [ ] Documentation updated (if needed)",
                "- [ ] README updated (if needed)",
            ]),
        ])

    def _build_notes_section(self, commits: list[str], categories: FileCategories, suggestions: list[str]) -> str:
        parts = [
            "## Additional Notes",
            "<!-- Any other context, concerns, or discussion points -->",
            "### Recent Commits",
            "\n".join(f"- {c}" for c in commits) or "- No commits found",
            "### Modified Files by Category",
            self.build_file_list(categories),
        ]
        if suggestions:
            parts.append("### 💡 Generated Suggestions")
            parts.append("\n".join(f"- {s}" for s in suggestions))
        return "\n\n".join(parts)

    def build_file_list(self, categories: FileCategories) -> str:
        """Full listing by category, at most LISTED_PER_CATEGORY files each."""
        blocks = []
        for category, files in categories.non_empty():
            lines = [f"**{category.title}** ({len(files)}):"]
            lines.extend(f"- `{path}`" for path in files[:LISTED_PER_CATEGORY])
            hidden = len(files) - LISTED_PER_CATEGORY
            if hidden > 0:
                lines.append(f"- _...and {hidden} more_")
            blocks.append("\n".join(lines))

        return "\n\n".join(blocks) or "- No files modified"

    def _build_metadata(self, pr_type: PRType, report: ComplexityReport) -> str:
        return (
            f"**Metadata**: Type: {pr_type.label} | Priority: [High/Medium/Low] | "
            f"Complexity: {report.complexity} | Risk: {report.risk} | "
            f"Files: {report.file_count} | Lines: +{report.total_added}/-{report.total_removed}"
        )
