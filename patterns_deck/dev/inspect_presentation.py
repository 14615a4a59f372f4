import sys
from pptx import Presentation


def inspect_presentation(path, target_slide=None):
    prs = Presentation(path)
    print("Total slides:", len(prs.slides))
    for i, slide in enumerate(prs.slides, start=1):
        print("="*60)
        print(f"Slide: {i}")
        if target_slide and i != target_slide:
            continue
        for j, shape in enumerate(slide.shapes):
            first_line = ""
            size = None
            if shape.has_text_frame and shape.text_frame.paragraphs:
                paragraph = shape.text_frame.paragraphs[0]
                first_line = paragraph.text
                if paragraph.runs:
                    size = paragraph.runs[0].font.size
            print(
                f"  Shape {j}:   "
                f"name='{shape.name}', "
                f"text='{first_line[:50]}', "
                f"size={size.pt if size is not None else None}"
            )
        if slide.has_notes_slide:
            print(f"  Notes: {slide.notes_slide.notes_text_frame.text}")
        print("-"*60)

if __name__ == "__main__":
    # python -m patterns_deck.dev.inspect_presentation output/design_patterns_*.pptx [slide]
    inspect_presentation(sys.argv[1], int(sys.argv[2]) if len(sys.argv) > 2 else None)
