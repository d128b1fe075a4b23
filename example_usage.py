import os
import sys
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), 'src')))

from doc_extract import DocExtractError, DocumentPipeline


def main():
    # 1. Initialize the pipeline from a JSON configuration payload
    pipeline = DocumentPipeline.from_payload(
        '{"max_length": 100000, "pdf": {"ocr_strategy": "NO_OCR"}, "ocr": {"language": "eng"}}'
    )

    # 2. Define a document source
    # Replace with a real document path
    doc_path = "sample_invoice.pdf"

    if not os.path.exists(doc_path):
        print(f"File {doc_path} not found. Please provide a valid document.")
        return

    print(f"Processing {doc_path}...")

    # 3. Extract from the path, then from the same bytes
    try:
        result = pipeline.extract_from_file(doc_path)
        with open(doc_path, "rb") as f:
            from_bytes = pipeline.extract_from_bytes(f.read())

        # 4. Inspect results
        print("\n--- Extraction Complete ---")
        print(f"Text Length: {len(result.content)} chars")
        print(f"Same content from bytes: {result.content == from_bytes.content}")

        print("\n--- Metadata ---")
        print(result.metadata)

        print("\n--- Sample Text ---")
        print(result.content[:200] + "...")

    except DocExtractError as e:
        print(f"Error processing document: {e}")

if __name__ == "__main__":
    main()
