"""Prompt Renderer - Instructions for an assistant that fills in the PR template."""

GUIDE_PATH = ".github/PR_WRITING_GUIDE.md"

# Mirrors the headings of the rendered document, in order
_SECTION_GUIDANCE = """\
#### 📝 Problem Statement
- What bug/issue prompted this PR?
- Be crystal clear - reviewers should understand immediately

#### 🔄 Reproduction Steps (for bugs only)
Use numbered list format:
```markdown
1. Set profile language to English
2. Navigate to /ar (Arabic)
3. Login with credentials
4. **Result**: ERR_TOO_MANY_REDIRECTS
```

#### 🔍 Root Cause (for bugs only)
- WHY did this happen? (not just what)
- What was the technical reason?
- **Add ASCII diagram** if the flow is complex

#### ✅ Solution
- High-level description of your approach
- Explain the mechanism (the "why it works")

#### 💡 Why This Works (CRITICAL!)
Use the Before/After format:
- **Before**: What was broken
- **After**: How it's fixed

#### 📂 Changes Made
For EACH file describe what changed and why

#### 🧪 Test Matrix
Fill in the table with actual test cases

#### ⚠️ Regression Testing (CRITICAL!)
Verify and check off all items in the regression testing checklist

#### 📊 Impact Analysis
Check the appropriate boxes and fill in details

#### 🔗 Related Issues
Link to the issue: `Closes #123`

#### ✅ Checklist
Check ALL relevant items!"""

_PRO_TIPS = """\
## ✨ Pro Tips

1. **Be Specific**: Use actual function names, file paths, line numbers
2. **Show, Don't Tell**: Code snippets > descriptions
3. **Think Like a Reviewer**: What would YOU want to know?
4. **Test for Regressions**: ALWAYS verify existing functionality still works!"""


class PromptRenderer:
    """Renders the assistant prompt that is copied to the clipboard."""

    def render(self, output_path: str, commits: list[str], files: list[str], base_branch: str) -> str:
        sections = [
            f"# Fill PR Summary: {output_path}",
            self._build_context_section(commits, files),
            "---",
            self._build_mission_section(output_path, base_branch),
            "---",
            _PRO_TIPS,
            "---",
            f"**Output**: A complete, reviewer-ready `{output_path}`!",
        ]
        return "\n\n".join(sections) + "\n"

    def _build_context_section(self, commits: list[str], files: list[str]) -> str:
        file_list = "\n".join(f"  - {f}" for f in files)
        commit_list = "\n".join(f"{i}. {c}" for i, c in enumerate(commits, 1))
        return f"""## 📋 What You're Working With

**Files Changed ({len(files)})**:
{file_list}

**Your Commits**:
{commit_list}"""

    def _build_mission_section(self, output_path: str, base_branch: str) -> str:
        return f"""## 🎯 Your Mission

Read the actual code changes and fill in `{output_path}` with a complete, reviewer-friendly PR description.

### Step 1: Read the PR Writing Guide (if available)
Check if there's a `{GUIDE_PATH}` in your project - it may have examples and templates.

### Step 2: Analyze the Code Changes
```bash
git diff {base_branch}..HEAD
```

For each changed file, understand:
- **What** changed (which functions, variables, logic)
- **Why** it changed (what problem does it solve)
- **How** it works (the mechanism, not just the diff)

### Step 3: Fill in {output_path}

Replace **ALL** `<!-- TODO -->` comments with real content. Follow the template structure:

{_SECTION_GUIDANCE}"""
