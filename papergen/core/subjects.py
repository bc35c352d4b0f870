"""
Subject profiles for prompt rules and fallback question templates.

Each profile bundles everything that varies by subject domain:
- prompt rules and worked examples used by the prompt builder
- question text templates per (type, difficulty) used by the fallback generator
- keyword-matched MCQ option sets and default option sets

Profiles are looked up by case-insensitive substring match of the subject
name against each profile's keywords, in table order. Subjects that match
nothing get DEFAULT_PROFILE.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

Templates = Dict[str, Dict[str, List[str]]]
OptionSet = Tuple[str, ...]


@dataclass(frozen=True)
class SubjectProfile:
    """Subject specific prompt rules, templates and option banks."""
    key: str
    keywords: Tuple[str, ...]
    prompt_heading: str
    prompt_rules: Tuple[str, ...]
    prompt_examples: Tuple[str, ...] = ()
    templates: Templates = field(default_factory=dict)
    # (keyword, options) pairs, first keyword found in the question text wins
    option_sets: Tuple[Tuple[str, OptionSet], ...] = ()
    # rotated by variation index when no option_sets keyword matches
    default_options: Tuple[OptionSet, ...] = ()

    def matches(self, subject: str) -> bool:
        subject = subject.lower()
        return any(keyword in subject for keyword in self.keywords)

    def templates_for(self, question_type: str, difficulty: str) -> List[str]:
        return self.templates.get(question_type, {}).get(difficulty, [])

    def options_for(self, question_text: str, index: int = 0) -> Optional[List[str]]:
        # case sensitive: "pH" must not match "phase"
        for keyword, options in self.option_sets:
            if keyword in question_text:
                return list(options)
        if self.default_options:
            return list(self.default_options[index % len(self.default_options)])
        return None


# ============================================================================
# Shared prompt rules
# ============================================================================

_SCIENCE_RULES = (
    "Include precise scientific terminology and concepts.",
    "Reference appropriate scientific laws, theories, and principles.",
    "For numeric problems, include appropriate units and reasonable values.",
    "Balance theoretical concepts with practical applications.",
    "For chemistry, include appropriate chemical formulas, reactions, and nomenclature when relevant.",
    "For physics, include relevant equations and ensure physical quantities have correct dimensions.",
)


# ============================================================================
# Mathematics
# ============================================================================

MATHEMATICS = SubjectProfile(
    key="mathematics",
    keywords=("math", "algebra", "geometry", "calculus"),
    prompt_heading="For mathematics questions:",
    prompt_rules=(
        "Include specific numerical values, equations, or mathematical concepts in each question.",
        "MCQ options for math questions must contain plausible numerical answers or mathematical expressions.",
        "Ensure all mathematical formulas are correct and properly formatted.",
        "For questions involving calculations, make sure the calculations are reasonable for the time constraints.",
        "Cover different areas of mathematics such as algebra, geometry, calculus, statistics, etc. as appropriate for the topic.",
        "Include questions that test conceptual understanding, not just computational skills.",
    ),
    prompt_examples=(
        'MCQ: "If the roots of the quadratic equation x² + bx + c = 0 are 3 and -5, what is the value of b + c?" Options: ["2", "-2", "8", "-15"]',
        'Short: "Explain the difference between permutation and combination with examples from real-life situations."',
        'Long: "Derive the formula for the volume of a sphere using calculus, and explain its applications in solving real-world problems."',
    ),
    templates={
        "mcq": {
            "easy": [
                "Find the solution to this equation: If x + 5 = 12, what is the value of x?",
                "What is the area of a rectangle with length 8 units and width 6 units?",
                "Which of the following is the correct formula for the area of a circle?",
                "If a number is divisible by both 2 and 3, it is also divisible by what number?",
            ],
            "medium": [
                "A quadratic equation has roots at x = 2 and x = -3. What is the equation in standard form?",
                "In a right-angled triangle, if one angle is 30°, what is the other acute angle?",
                "Which trigonometric function equals the ratio of the opposite side to the hypotenuse?",
                "If f(x) = 2x² + 3x - 5, what is the value of f(2)?",
            ],
            "hard": [
                "Which method would you use to determine the convergence of an infinite series?",
                "In a coordinate geometry problem involving a circle, what is the relationship between the center, radius, and a point on the circle?",
                "Given a polynomial function, how would you find all its roots if one root is already known?",
                "What theorem helps determine if a given matrix is diagonalizable?",
            ],
        },
        "short": {
            "easy": [
                "Explain the difference between permutation and combination with examples.",
                "Describe the properties of parallel lines in Euclidean geometry.",
                "Explain what makes a quadrilateral a parallelogram.",
                "Describe the relationship between the radius and diameter of a circle.",
            ],
            "medium": [
                "Explain how the quadratic formula is derived from the standard form of a quadratic equation.",
                "Describe the relationship between differentiation and integration in calculus.",
                "Explain how to use the sine and cosine rules to solve triangles.",
                "Describe the properties of a normal distribution in statistics.",
            ],
            "hard": [
                "Explain the fundamental theorem of calculus and its significance in mathematics.",
                "Describe how eigenvalues and eigenvectors are used in linear transformations.",
                "Explain the concept of statistical hypothesis testing with examples.",
                "Discuss the importance of number theory in modern cryptography.",
            ],
        },
        "long": {
            "easy": [
                "Explain the concept of factorization of algebraic expressions with examples.",
                "Describe the properties and applications of different types of quadrilaterals.",
                "Explain the concept of linear equations and methods to solve them.",
                "Describe the properties of triangles and their significance in geometry.",
            ],
            "medium": [
                "Explain the concept of functions, their types, and applications with relevant examples.",
                "Describe the methods for solving systems of linear equations and their applications.",
                "Explain the concept of probability, its laws, and applications with examples.",
                "Describe the properties of geometric sequences and series with applications.",
            ],
            "hard": [
                "Explain differential calculus, its principles, and applications in real-world problems.",
                "Describe the concepts of vectors, vector spaces, and their applications in physics and engineering.",
                "Explain the principles of statistical inference and their applications in data analysis.",
                "Describe the concepts of complex numbers, their geometric interpretation, and applications.",
            ],
        },
    },
    option_sets=(
        ("equation", ("x = 5", "x = 7", "x = 8", "x = 9")),
        ("area", ("36 square units", "48 square units", "14 square units", "24 square units")),
        ("circle", ("A = 2πr", "A = πr", "A = πr²", "A = 2πr²")),
        ("divisible", ("4", "5", "6", "9")),
        ("quadratic", ("x² - x - 6 = 0", "x² + x - 6 = 0", "x² - x + 6 = 0", "x² + x + 6 = 0")),
        ("triangle", ("45°", "60°", "90°", "180°")),
        ("trigonometric", ("sine", "cosine", "tangent", "secant")),
        ("f(x)", ("7", "9", "11", "13")),
        ("convergence", ("Ratio test", "Root test", "Integral test", "Comparison test")),
        ("matrix", ("Eigenvalue Theorem", "Diagonalization Theorem", "Characteristic Equation", "Cayley-Hamilton Theorem")),
    ),
    default_options=(
        ("The first mathematical option", "The second mathematical option",
         "The third mathematical option", "The correct mathematical answer"),
    ),
)


# ============================================================================
# Physics
# ============================================================================

PHYSICS = SubjectProfile(
    key="physics",
    keywords=("physics",),
    prompt_heading="For {subject} questions:",
    prompt_rules=_SCIENCE_RULES,
    prompt_examples=(
        'MCQ: "A body of mass 2 kg is moving with a velocity of 10 m/s. What is its kinetic energy?" Options: ["100 J", "200 J", "20 J", "1000 J"]',
        'Short: "Explain the principle of conservation of angular momentum with an example."',
        'Long: "Describe the photoelectric effect and how it provides evidence for the particle nature of light."',
    ),
    templates={
        "mcq": {
            "easy": [
                "What is the SI unit of force?",
                "Which of the following is the formula for calculating work done?",
                "What type of energy does a moving object possess?",
                "Which physical quantity remains constant in an isolated system according to conservation laws?",
            ],
            "medium": [
                "A 2 kg object moving at 5 m/s collides with a stationary object. What principle determines the outcome?",
                "Which wave phenomenon explains the bending of light as it passes from air to water?",
                "In an electrical circuit, what determines the current according to Ohm's law?",
                "What happens to the wavelength of light when it passes through a medium with higher refractive index?",
            ],
            "hard": [
                "Which quantum principle describes the impossibility of simultaneously measuring position and momentum precisely?",
                "What is the relativistic effect on mass as an object approaches the speed of light?",
                "In thermodynamics, which law relates to the increase of entropy in isolated systems?",
                "How does the strong nuclear force vary with distance between nucleons?",
            ],
        },
        "short": {
            "easy": [
                "Explain Newton's three laws of motion.",
                "Describe the difference between scalar and vector quantities with examples.",
                "Explain the concept of potential energy.",
                "Describe how sound waves propagate through different media.",
            ],
            "medium": [
                "Explain the principle of conservation of energy with examples.",
                "Describe the electromagnetic spectrum and its applications.",
                "Explain how a simple electric motor works.",
                "Describe the relationship between force, pressure and area.",
            ],
            "hard": [
                "Explain the concept of wave-particle duality in quantum mechanics.",
                "Describe Einstein's special theory of relativity and its implications.",
                "Explain the principles of nuclear fission and fusion.",
                "Describe the quantum mechanical model of the atom.",
            ],
        },
    },
    option_sets=(
        ("SI unit", ("Newton", "Joule", "Watt", "Pascal")),
        ("energy", ("Potential energy", "Kinetic energy", "Thermal energy", "Nuclear energy")),
        ("conservation", ("Momentum", "Acceleration", "Velocity", "Force")),
        ("quantum", ("Uncertainty principle", "Wave function collapse", "Quantum entanglement", "Pauli exclusion principle")),
    ),
    default_options=(
        ("First physics concept", "Second physics concept", "Third physics concept", "Correct physics answer"),
    ),
)


# ============================================================================
# Chemistry
# ============================================================================

CHEMISTRY = SubjectProfile(
    key="chemistry",
    keywords=("chemistry",),
    prompt_heading="For {subject} questions:",
    prompt_rules=_SCIENCE_RULES,
    prompt_examples=(
        'MCQ: "Which of the following is an example of a homogeneous mixture?" Options: ["Sand and water", "Salt solution", "Oil and water", "Granite"]',
        'Short: "Explain the difference between physical and chemical changes with examples."',
        'Long: "Describe the structure of the periodic table and explain how elements\' properties relate to their positions."',
    ),
    templates={
        "mcq": {
            "easy": [
                "Which of the following is an example of a chemical change?",
                "What type of bond forms between two non-metal atoms?",
                "Which element has the electronic configuration 2,8,8,1?",
                "What is the pH of a neutral solution at 25°C?",
            ],
            "medium": [
                "Which orbital has the quantum numbers n=3, l=1?",
                "What type of isomerism is exhibited by butane and 2-methylpropane?",
                "Which functional group characterizes alcohols?",
                "What happens to the rate of reaction when a catalyst is added?",
            ],
            "hard": [
                "Which principle explains why electron affinity generally decreases down a group in the periodic table?",
                "What is the hybridization of carbon in acetylene (C₂H₂)?",
                "Which mechanism best explains the reaction between alkenes and hydrogen halides?",
                "What is the relationship between Gibbs free energy and spontaneity of a reaction?",
            ],
        },
    },
    option_sets=(
        ("chemical change", ("Melting of ice", "Evaporation of water", "Rusting of iron", "Grinding of salt")),
        ("bond", ("Ionic bond", "Covalent bond", "Metallic bond", "Hydrogen bond")),
        ("pH", ("0", "7", "14", "1")),
    ),
    default_options=(
        ("First chemistry concept", "Second chemistry concept", "Third chemistry concept", "Correct chemistry answer"),
    ),
)


# ============================================================================
# Computer Science
# ============================================================================

COMPUTER_SCIENCE = SubjectProfile(
    key="computer_science",
    keywords=("computer", "programming"),
    prompt_heading="For computer science questions:",
    prompt_rules=(
        "Use proper programming syntax and conventions if code is involved.",
        "Reference appropriate computing concepts, algorithms, or data structures.",
        "Balance theoretical computer science with practical programming topics.",
        "Include questions on problem-solving approaches in computing.",
        "Consider both software and hardware aspects as appropriate to the topic.",
    ),
    prompt_examples=(
        'MCQ: "What is the time complexity of binary search algorithm?" Options: ["O(n)", "O(n²)", "O(log n)", "O(n log n)"]',
        'Short: "Explain the concept of inheritance in object-oriented programming with an example."',
        'Long: "Describe how the TCP/IP protocol suite enables reliable communication over the internet."',
    ),
    templates={
        "mcq": {
            "easy": [
                "Which data structure operates on a First-In-First-Out (FIFO) principle?",
                "What is the purpose of a constructor in object-oriented programming?",
                "Which sorting algorithm has the best average time complexity?",
                "What does HTML stand for in web development?",
            ],
            "medium": [
                "What is the time complexity of binary search?",
                "Which design pattern would you use to create objects without specifying their concrete classes?",
                "What problem does normalization solve in database design?",
                "Which networking protocol is connectionless?",
            ],
            "hard": [
                "Which algorithm would be most efficient for finding the shortest path in a weighted graph?",
                "What is the significance of the CAP theorem in distributed systems?",
                "Which concurrency control mechanism would best prevent deadlock in a multi-threaded application?",
                "How does public key cryptography ensure secure communication?",
            ],
        },
        "short": {
            "easy": [
                "Explain the difference between a stack and a queue with examples.",
                "Describe the principles of object-oriented programming.",
                "Explain how a binary search algorithm works.",
                "Describe the client-server architecture in networking.",
            ],
            "medium": [
                "Explain the concept of recursion and provide an example.",
                "Describe the MVC architectural pattern and its benefits.",
                "Explain the principles of database normalization.",
                "Describe how virtual memory works in operating systems.",
            ],
            "hard": [
                "Explain the concept of polymorphism and its implementation in programming.",
                "Describe the principles and applications of machine learning algorithms.",
                "Explain how blockchain technology ensures data integrity and security.",
                "Describe the principles of concurrent programming and thread synchronization.",
            ],
        },
    },
    option_sets=(
        ("data structure", ("Stack", "Queue", "Binary tree", "Hash table")),
        ("time complexity", ("O(1)", "O(n)", "O(log n)", "O(n²)")),
        ("design pattern", ("Singleton", "Factory", "Observer", "Decorator")),
    ),
    default_options=(
        ("First programming concept", "Second programming concept", "Third programming concept", "Correct programming answer"),
    ),
)


# ============================================================================
# Biology
# ============================================================================

BIOLOGY = SubjectProfile(
    key="biology",
    keywords=("biology", "life science"),
    prompt_heading="For biology questions:",
    prompt_rules=(
        "Include precise biological terminology and concepts.",
        "Cover different biological systems, processes, or hierarchies as appropriate.",
        "Connect theoretical biological concepts to real-world examples.",
        "Include questions that test understanding of biological mechanisms and processes.",
        "Balance questions across different areas like anatomy, physiology, genetics, ecology, etc.",
    ),
    prompt_examples=(
        'MCQ: "Which of the following is NOT a function of the liver?" Options: ["Detoxification", "Production of insulin", "Production of bile", "Storage of glycogen"]',
        'Short: "Explain the process of cellular respiration and its significance."',
        'Long: "Describe the structure and function of DNA and explain how it replicates."',
    ),
    templates={
        "mcq": {
            "easy": [
                "Which organelle is known as the powerhouse of the cell?",
                "What is the main function of the respiratory system?",
                "Which process converts glucose to pyruvate?",
                "What type of tissue connects bones to muscles?",
            ],
            "medium": [
                "Which phase of meiosis involves crossing over?",
                "What is the role of tRNA in protein synthesis?",
                "Which hormone regulates blood glucose levels?",
                "What is the function of the Golgi apparatus in a cell?",
            ],
            "hard": [
                "Which principle best explains the non-Mendelian inheritance pattern observed in this genetic disorder?",
                "What mechanism regulates gene expression in prokaryotes?",
                "How does feedback inhibition control metabolic pathways?",
                "What is the relationship between natural selection and genetic drift in evolutionary processes?",
            ],
        },
    },
    option_sets=(
        ("organelle", ("Nucleus", "Mitochondria", "Ribosome", "Golgi apparatus")),
        ("meiosis", ("Prophase I", "Metaphase I", "Anaphase I", "Telophase I")),
        ("hormone", ("Insulin", "Thyroxine", "Estrogen", "Testosterone")),
    ),
    default_options=(
        ("First biological concept", "Second biological concept", "Third biological concept", "Correct biological answer"),
    ),
)


# ============================================================================
# History / Social Studies
# ============================================================================

HISTORY = SubjectProfile(
    key="history",
    keywords=("history", "social"),
    prompt_heading="For history/social studies questions:",
    prompt_rules=(
        "Include accurate historical facts, events, dates, and figures.",
        "Frame questions that test causal relationships and historical significance.",
        "Balance factual recall with analytical and interpretive questions.",
        "Include questions that consider multiple historical perspectives.",
        "Test understanding of historical contexts and their implications.",
    ),
    prompt_examples=(
        'MCQ: "Which event directly led to the start of World War I?" Options: ["The Great Depression", "Assassination of Archduke Franz Ferdinand", "The Treaty of Versailles", "Russian Revolution"]',
        'Short: "Explain the significance of the Industrial Revolution on society."',
        'Long: "Analyze the causes and consequences of the French Revolution."',
    ),
    templates={
        "mcq": {
            "easy": [
                "When did World War II end?",
                "Who was the first President of the United States?",
                "Which civilization built the pyramids at Giza?",
                "What document established the United Nations?",
            ],
            "medium": [
                "Which economic system emerged during the Industrial Revolution?",
                "What was the main cause of the French Revolution?",
                "Which treaty ended World War I?",
                "What impact did the printing press have on European society?",
            ],
            "hard": [
                "How did cold war ideologies influence post-colonial movements in developing nations?",
                "Which philosophical movement most influenced the framers of the U.S. Constitution?",
                "What factors led to the collapse of the Roman Empire?",
                "How did geographic factors influence the development of ancient civilizations?",
            ],
        },
    },
)


# ============================================================================
# Language / Literature
# ============================================================================

LANGUAGE = SubjectProfile(
    key="language",
    keywords=("language", "literature", "english"),
    prompt_heading="For language and literature questions:",
    prompt_rules=(
        "Include questions on grammar, vocabulary, comprehension, and analysis.",
        "For literature, reference appropriate literary works, authors, and concepts.",
        "Balance questions on literary devices, themes, characters, and contexts.",
        "Include questions that test both textual understanding and critical analysis.",
        "For language questions, test both language usage and understanding of linguistic concepts.",
    ),
    prompt_examples=(
        'MCQ: "Which literary device is used in the phrase \'The wind whispered through the trees\'?" Options: ["Metaphor", "Personification", "Simile", "Hyperbole"]',
        'Short: "Explain the difference between a protagonist and an antagonist with examples."',
        'Long: "Analyze the themes of identity and belonging in modern literature."',
    ),
    templates={
        "mcq": {
            "easy": [
                "Which of these is an example of a simile?",
                "What is the main function of a verb in a sentence?",
                "Which literary movement emphasized emotion and individualism?",
                "What is the definition of a synonym?",
            ],
            "medium": [
                "Which narrative technique involves revealing events out of chronological order?",
                "What rhetorical device repeats consonant sounds at the beginning of words?",
                "Which poetic form consists of fourteen lines with a specific rhyme scheme?",
                "What grammatical function does a subordinating conjunction serve?",
            ],
            "hard": [
                "Which literary theory would best analyze the class dynamics in this text?",
                "What linguistic phenomenon explains the evolution of this grammatical structure?",
                "Which narrative perspective creates the most limited point of view?",
                "How does metafiction challenge conventional narrative structures?",
            ],
        },
    },
)


# ============================================================================
# Default (any other subject)
# ============================================================================

DEFAULT_PROFILE = SubjectProfile(
    key="general",
    keywords=(),
    prompt_heading="For {subject} questions:",
    prompt_rules=(
        "Include domain-specific terminology and concepts relevant to the field.",
        "Balance factual knowledge with analytical and application-based questions.",
        "Include questions that test both foundational knowledge and deeper understanding.",
        "Connect theoretical concepts to practical or real-world applications where appropriate.",
        "Include a range of question types to test different cognitive skills within the subject.",
    ),
    prompt_examples=(
        'MCQ: "Which of the following best describes a key concept in {subject}?" Options: ["First option", "Second option", "Third option", "Fourth option"]',
        'Short: "Explain an important principle in {subject} and its significance."',
        'Long: "Analyze a major theory or framework in {subject} and discuss its applications."',
    ),
    templates={
        "mcq": {
            "easy": [
                "Which of the following statements is correct?",
                "What is the primary concept in this field of study?",
                "Which principle best explains this basic phenomenon?",
                "Which of these is a fundamental fact in this subject area?",
            ],
            "medium": [
                "How do these principles impact related systems?",
                "What would happen if these concepts were applied to a novel situation?",
                "Which application demonstrates the practical utility of this theory?",
                "When analyzing this problem, which approach yields the most accurate results?",
            ],
            "hard": [
                "Which advanced theory best explains these complex relationships?",
                "What are the far-reaching implications of these principles in this domain?",
                "How would you solve this multi-step problem using appropriate methods?",
                "What is the relationship between these advanced theoretical concepts?",
            ],
        },
        "short": {
            "easy": [
                "Explain this principle in your own words.",
                "What are the key concepts in this field?",
                "Describe the importance of this theory in modern applications.",
                "Outline the basic framework of this system.",
            ],
            "medium": [
                "Compare and contrast these related theoretical approaches.",
                "Explain how this process affects interconnected systems.",
                "Analyze the application of these principles in real-world scenarios.",
                "Describe the evolution of understanding in this field.",
            ],
            "hard": [
                "Critically evaluate the current theoretical understanding in this area.",
                "Analyze how these principles interact with other complex systems.",
                "Explain the limitations of current approaches to this problem.",
                "Evaluate the significance of recent developments in this field.",
            ],
        },
        "long": {
            "easy": [
                "Describe in detail the key components and processes of this system.",
                "Explain the historical development and current understanding of this theory.",
                "Outline these fundamental principles with relevant examples.",
                "Describe how these concepts are applied in practical situations.",
            ],
            "medium": [
                "Discuss the significance and applications of these principles in modern contexts.",
                "Analyze the relationship between these theories and related concepts.",
                "Explain how this field has evolved and its current state of development.",
                "Evaluate the strengths and weaknesses of different approaches to this problem.",
            ],
            "hard": [
                "Critically analyze these theoretical foundations and propose improvements.",
                "Synthesize multiple perspectives on this problem and develop your own framework.",
                "Evaluate competing theories and argue for the most convincing approach.",
                "Analyze this complex scenario and develop a comprehensive solution.",
            ],
        },
        "diagram": {
            "easy": [
                "Draw a labelled diagram of the basic structure involved and name each part.",
                "Sketch a simple flow diagram showing the main stages of this process.",
            ],
            "medium": [
                "Draw a neat labelled diagram and explain how each component contributes to the overall function.",
                "Represent the relationship between the key quantities with a suitable diagram and interpret it.",
            ],
            "hard": [
                "Construct a detailed diagram of the complete system and analyze how a change in one component affects the others.",
                "Draw and compare diagrams of two competing models and justify which better explains the observations.",
            ],
        },
        "code": {
            "easy": [
                "Write a short program that demonstrates the basic idea and explain its output.",
                "Trace the execution of a simple code fragment that applies this concept and state the result.",
            ],
            "medium": [
                "Write a function that implements this procedure and explain its time complexity.",
                "Identify and correct the errors in a given implementation of this procedure.",
            ],
            "hard": [
                "Design and implement an efficient solution to a non-trivial problem using this concept, justifying your design choices.",
                "Refactor a naive implementation of this procedure for performance and prove its correctness.",
            ],
        },
        "hots": {
            "easy": [
                "Predict what would happen if one key assumption in this area were removed, and justify your prediction.",
                "Give an everyday situation where this idea applies and explain why it applies there.",
            ],
            "medium": [
                "Propose an experiment or investigation that could test this principle, and state the expected outcome.",
                "Evaluate a common misconception in this area and explain how you would correct it.",
            ],
            "hard": [
                "Critically evaluate whether this principle still holds under extreme conditions, supporting your argument with reasoning.",
                "Devise an original problem that requires combining several of these ideas, then solve it.",
            ],
        },
        "case_study": {
            "easy": [
                "Read the following scenario and identify the key concepts it illustrates.",
                "Using a real-world case, describe how these principles were applied.",
            ],
            "medium": [
                "Analyze the given case, identify the problem, and recommend a course of action based on these principles.",
                "Study a practical situation where these ideas failed and explain the causes of failure.",
            ],
            "hard": [
                "Evaluate the decisions taken in a complex case, propose alternatives, and justify your recommendations.",
                "Analyze a multi-stakeholder scenario and develop a comprehensive solution that balances competing constraints.",
            ],
        },
    },
    default_options=(
        ("Incorrect option based on a common misconception", "Partially correct but incomplete option",
         "Option that seems plausible but contains errors", "The correct and complete answer"),
        ("Option that misapplies a principle", "Option using an outdated theory",
         "Option with calculation errors", "Correct application of principles"),
        ("First incorrect approach", "Second incorrect approach", "Third incorrect approach", "Correct approach"),
        ("Option with logical fallacy", "Option with incomplete reasoning",
         "Option missing key considerations", "Option with complete and correct reasoning"),
    ),
)


SUBJECT_PROFILES: Tuple[SubjectProfile, ...] = (
    MATHEMATICS,
    PHYSICS,
    CHEMISTRY,
    COMPUTER_SCIENCE,
    BIOLOGY,
    HISTORY,
    LANGUAGE,
)


def get_subject_profile(subject: Optional[str]) -> SubjectProfile:
    """Return the profile whose keywords occur in the subject name, else DEFAULT_PROFILE."""
    if not subject:
        return DEFAULT_PROFILE
    for profile in SUBJECT_PROFILES:
        if profile.matches(subject):
            return profile
    return DEFAULT_PROFILE
