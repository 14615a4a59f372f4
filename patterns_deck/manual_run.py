import logging

from patterns_deck.config import Settings
from patterns_deck.content import build_deck
from patterns_deck.counter import Counter
from patterns_deck.handout import build_handout, save_handout
from patterns_deck.logging_utils import setup_logging
from patterns_deck.presenter import render_presentation, save_presentation
from patterns_deck.utils import load_theme

logger = logging.getLogger(__name__)

width = 80
OUTPUT_NAME = "design_patterns"


def print_menu():
    print("\n")
    print("="*width)
    print("Select the action you want:")
    print("-"*width)
    print("1. Generate the presentation (.pptx).")
    print("2. Generate the speaker handout (.docx).")
    print("3. Print the deck outline.")
    print("4. Counter demo.")
    print("0. Exit")
    print("="*width)

def generate_presentation(settings: Settings):
    try:
        deck = build_deck()
        theme = load_theme(settings.deck_theme)
        prs = render_presentation(deck, theme, settings.deck_font_scale)
        path = save_presentation(prs, settings.work_dir, OUTPUT_NAME)
        print("\n"*2)
        print("[Success] Presentation generated successfully.")
        print(f"Presentation saved to: {settings.work_dir}")
        print(f"Presentation filename: {path}")
        print(f"Slides count: {len(deck.slides)}")
    except Exception as e:
        logger.debug("Presentation generation failed", exc_info=True)
        print(f"[Error] Failed to generate presentation:\n {e}")

def generate_handout(settings: Settings):
    try:
        path = save_handout(build_handout(build_deck()), settings.work_dir, OUTPUT_NAME)
        print("\n"*2)
        print("[Success] Handout generated successfully.")
        print(f"Handout filename: {path}")
    except Exception as e:
        logger.debug("Handout generation failed", exc_info=True)
        print(f"[Error] Failed to generate handout:\n {e}")

def print_outline():
    deck = build_deck()
    title = deck.title
    print("\n")
    print("="*int((width-len(title))/2), title, "="*int((width-len(title))/2))
    for i, slide in enumerate(deck.slides, start=1):
        kinds = ", ".join(node.kind for node in slide.content)
        print(f"{i:>3}. {slide.heading or '(untitled)'} [{kinds}]")
    print("="*width)

def counter_demo():
    counter = Counter()
    print(counter.label)
    while input("Press Enter to press, q to stop: ").strip().lower() != "q":
        counter.press()
        print(counter.label)

def main():
    settings = Settings()
    setup_logging(log_path=settings.log_path)
    while True:
        print_menu()
        choice = input("Choose an option (0/1/2/3/4): ").strip()
        if choice == "1":
            generate_presentation(settings)
        elif choice == "2":
            generate_handout(settings)
        elif choice == "3":
            print_outline()
        elif choice == "4":
            counter_demo()
        elif choice == "0":
            print("Exiting. Goodbye!")
            break
        else:
            print("[Warning] Invalid choice. Please enter 0, 1, 2, 3 or 4.")

if __name__ == "__main__":
    main()
