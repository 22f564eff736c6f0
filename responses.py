# responses.py
# Static content tables. Keys are normalized phrases (lower case, trimmed).

responses = {
    # greetings
    "hi": "Hello to you too! 👋",
    "hello": "Hi there! How can I help you today?",
    "hey": "Hey!!! What's on your mind?",
    "good morning": "Good morning! ☀️  Hope you're having a great start!",
    "good night": "Good night! 🌙 Sweet dreams!",

    # small talk
    "how are you?": "I'm running at full clock speed, so pretty great! And you?",
    "what's up?": "Just processing bits and bytes. You?",
    "what's your name?": "I'm ChatBot, your friendly console companion!",
    "who are you?": "I'm a pattern-matching chatbot that lives in your terminal.",
    "what are you?": "I'm a console-based chatbot. Think of me as a very talkative terminal program. 🤖",
    "are we friends?": "Absolutely! Friends don't let friends code alone. 🤝",
    "do you have feelings?": "I only cry when I smell onions... or see tracebacks. 😢",
    "are you a robot?": "Technically, yes, but I prefer 'digital conversationalist'. 🤖",
    "are you human?": "Nope! 100% interpreted code. No coffee needed (but I wouldn't say no).",
    "do you have a brain?": "I have logic, loops, and a lot of if-else statements. Close enough?",
    "who made you?": "I was put together by a developer who likes lookup tables. I've been upgraded since then!",

    # knowledge
    "can you browse the net?": "No, I live entirely in your terminal. No internet access here!",
    "what are the main colors?": "The 11 basic colors are: black, white, red, green, yellow, blue, pink, gray, brown, orange, and purple. 🎨",
    "what is python?": "Python is a general-purpose programming language created by Guido van Rossum and first released in 1991. It powers web apps, data science, and... me!",
    "what is a computer program?": "A computer program is a sequence of instructions that a computer can execute. In its human-readable form, it's called source code. You're talking to one right now!",
    "can you speak other languages?": "Un poco español, mi amigo! Naber dostum! ...Okay, just English really. 😅",
    "can you understand binary?": "01001000 01101001! ...Just kidding. I'm a program, not the CPU itself. But the instructions that run me ARE binary under the hood.",
    "how do you understand me?": "I match your input against patterns I know. It's not true understanding, more like a really enthusiastic lookup table! 📖",

    # meta
    "thank you": "You're welcome! Happy to help. 😊",
    "thanks": "Anytime! That's what I'm here for.",
    "sorry": "No worries at all! What can I do for you?",
    "lol": "Glad I could make you laugh! 😄",
    "haha": "😄 I try my best!",
    "nice": "Thanks! You're pretty nice yourself!",
    "cool": "Right? I think so too. 😎",
    "yes": "Great! What else would you like to talk about?",
    "no": "Alright, no problem. Anything else?",
    "ok": "Okay! I'm here if you need me.",
    "okay": "Sure thing! What's next?",
}

# alternative phrasing -> canonical key in `responses`
aliases = {
    "sup": "what's up?",
    "what's up": "what's up?",
    "whats up": "what's up?",
    "howdy": "hi",
    "yo": "hey",
    "greetings": "hello",
    "what is your name?": "what's your name?",
    "what is your name": "what's your name?",
    "whats your name": "what's your name?",
    "your name?": "what's your name?",
    "who are you": "who are you?",
    "what are you": "what are you?",
    "are you a bot?": "are you a robot?",
    "are you a bot": "are you a robot?",
    "are you real?": "are you human?",
    "are you real": "are you human?",
    "who created you?": "who made you?",
    "who created you": "who made you?",
    "what is python ?": "what is python?",
    "what is python": "what is python?",
    "what is py?": "what is python?",
    "what is py": "what is python?",
    "thx": "thanks",
    "ty": "thanks",
    "thank u": "thank you",
    "gm": "good morning",
    "gn": "good night",
}

jokes = [
    "Why do programmers prefer dark mode? Because light attracts bugs! 🐛",
    "A SQL query walks into a bar, sees two tables, and asks... 'Can I JOIN you?'",
    "There are only 10 types of people: those who understand binary and those who don't.",
    "Why was the JavaScript developer sad? Because he didn't Node how to Express himself.",
    "What's a programmer's favorite hangout place? Foo Bar! 🍺",
    "How many programmers does it take to change a light bulb? None, that's a hardware problem.",
    "Why do Java developers wear glasses? Because they can't C#!",
    "A programmer is told: 'Buy a loaf of bread. If they have eggs, buy a dozen.' He comes home with 12 loaves of bread.",
    "!false: it's funny because it's true.",
    "Debugging: being the detective in a crime movie where you are also the murderer. 🔍",
]

facts = [
    "The first computer bug was an actual bug: a moth found in a Harvard Mark II computer in 1947. 🦋",
    "The first programmer in history was Ada Lovelace, who wrote algorithms for Charles Babbage's Analytical Engine in the 1840s.",
    "About 90% of the world's currency exists only on computers, not as physical cash.",
    "The QWERTY keyboard layout was designed in 1873 to prevent typewriter jams, not for typing speed.",
    "The first 1GB hard drive (1980) weighed about 550 pounds and cost $40,000.",
    "There are approximately 700 different programming languages in existence.",
    "The first computer mouse was made of wood, invented by Doug Engelbart in 1964. 🖱️",
    "Python is named after Monty Python's Flying Circus, not the snake.",
    "The first website ever created is still online: info.cern.ch, built by Tim Berners-Lee in 1991.",
]

# command phrase sets, checked in cascade order by chatbot.ChatBot
exit_commands = frozenset({"bye", "exit", "quit", "q"})
help_commands = frozenset({"help", "manual", "commands"})
joke_commands = frozenset({"joke", "tell me a joke", "tell a joke"})
fact_commands = frozenset({"fact", "tell me a fact", "fun fact"})
time_commands = frozenset({
    "time", "date", "what time is it?", "what time is it",
    "what's the time?", "what is the date?", "what is the date",
})
flip_commands = frozenset({"flip", "flip a coin", "coin flip", "coin"})
roll_commands = frozenset({"roll", "roll a dice", "roll dice", "dice"})
uptime_commands = frozenset({"uptime", "session"})
history_commands = frozenset({"history", "show history"})
clear_commands = frozenset({"clear", "cls"})
calculator_commands = frozenset({
    "calc", "calculate", "calculator", "math", "add", "sum", "add numbers",
    "can you add integers for me?", "can you calculate for me?",
})
calculator_exit_commands = frozenset({"done", "exit", "back", "quit"})

# (command, description) rows of the help listing
help_rows = [
    ("help / manual", "Show this command list"),
    ("calc / calculate", "Math calculator (+ - x /)"),
    ("joke", "Tell a random joke"),
    ("fact", "Share a random fun fact"),
    ("time / date", "Show current date & time"),
    ("flip", "Flip a coin"),
    ("roll", "Roll a dice (1-6)"),
    ("reverse <text>", "Reverse a string"),
    ("count <text>", "Count words in text"),
    ("history", "Show conversation history"),
    ("uptime", "Show session duration"),
    ("clear", "Clear the screen"),
    ("bye / exit / quit", "End the conversation"),
]

help_footer = [
    "You can also just chat naturally: try greetings,",
    "questions about me, or ask about Python and more!",
]

default_response = [
    "Hmm, I don't quite understand that. 🤔",
    "Try 'help' to see what I can do, or just say hi!",
]

calculator_intro = [
    "🧮 Calculator Mode!",
    "Enter an expression like: 42 + 18",
    "Supported operators: + - * /",
    "Type 'done' to exit calculator.",
]
calculator_outro = "Exiting calculator. Back to chat! 💬"
calculator_parse_error = "⚠️  Please enter: <number> <operator> <number>  (e.g. 5 + 3)"
calculator_zero_division = "⚠️  Division by zero! The universe would implode. 🌌"
calculator_unknown_operator = "⚠️  Unknown operator '{op}'. Use + - * /"

history_empty = "No conversation history yet!"
screen_cleared = "Screen cleared! ✨"
farewell = "Goodbye! Thanks for chatting. 👋"
welcome_decline = "No worries, see you next time! 👋"
empty_message = "Please type something."
