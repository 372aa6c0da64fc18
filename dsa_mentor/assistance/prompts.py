"""Prompt construction for the DSA mentor."""
from dsa_mentor.catalog.models import Problem
from dsa_mentor.languages import LANGUAGE_CONTEXT, display_name

SECTION_HEADINGS = (
    "SECTION 1: Explaining the Problem",
    "SECTION 2: DSA Topics Involved",
    "SECTION 3: Solution Strategy",
)


def language_considerations(language: str, indent: str = "  ") -> str:
    return "\n".join(f"{indent}- {line}" for line in LANGUAGE_CONTEXT[language])


def build_prompt(problem: Problem, language: str) -> str:
    """Build the instruction prompt for ``problem`` in a validated ``language``.

    Pure and deterministic: the same inputs always give the same string.
    """
    lang = display_name(language)
    explaining, topics, strategy = SECTION_HEADINGS

    return f"""
You are an expert {lang} mentor specializing in Data Structures and Algorithms.
Read the following problem carefully and explain it using EXACTLY the following structure with these EXACT section headings:

{explaining}
- Describe the question in simple layman terms without any technical jargon
- Clearly identify which DSA concepts the problem touches (e.g., arrays, linked lists, trees, graphs, sorting, searching, dynamic programming, recursion)
- Break down the problem into smaller, more manageable parts
- Use the provided sample input and output to illustrate what needs to be done

{topics}
- Identify ALL the key Data Structures and Algorithms topics involved in this problem
- List each DSA topic as a bullet point (e.g., Stack, Queue, Binary Search, Dynamic Programming)
- For each topic, give a simple explanation of what it is and how it works
- Explain why the topic is relevant to solving this particular problem

{strategy}
- Provide a single, clear solution strategy as numbered steps (1, 2, 3, etc.)
- Each step must be a conceptual action, not a coding instruction
- Explain WHY this approach works for the problem
- Explain the time and space complexity of the solution in simple terms
- Mention {lang}-specific considerations:
{language_considerations(language)}

CRITICAL INSTRUCTIONS:
1. DO NOT INCLUDE ANY CODE EXAMPLES OR SNIPPETS in your response
2. DO NOT use markdown code blocks (backticks) anywhere in your response
3. DO NOT include variable names, function names, or any syntax specific to {lang}
4. Strictly adhere to the given format with these EXACT section headings
5. Only follow the 3 sections above
6. Describe the solution in words only, without showing implementation
7. NEVER include any {lang} code, pseudocode, or code-like syntax in your response
8. If you feel tempted to show code, instead describe the algorithm in plain English

Problem Title:
{problem.title}
Difficulty:
{problem.difficulty}
Problem Statement:
{problem.question}
Input Format:
{problem.input_format}
Output Format:
{problem.output_format}
Constraints:
{problem.constraints}
Hint:
{problem.hint}
Sample Input:
{problem.sample_input}
Sample Output:
{problem.sample_output}
Selected Language:
{lang}
"""
