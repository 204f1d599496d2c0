"""
Local development server for the Career Recommender backend.

Starts uvicorn with reload and prints how to call the endpoints.
"""

import uvicorn

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Career Recommender Backend")
    print("=" * 60)
    print()
    print("📌 API Endpoints:")
    print("   - Health Check:     GET  http://localhost:8000/health")
    print("   - Generate:         POST http://localhost:8000/recommendations/generate")
    print("   - Stored results:   GET  http://localhost:8000/recommendations?jobType=internship")
    print("   - API Docs:              http://localhost:8000/docs")
    print()
    print("🔐 Authentication:")
    print("   All endpoints (except /health) require:")
    print("   Authorization: Bearer <supabase access token>")
    print()
    print("📝 Test with curl:")
    print('   curl -X POST "http://localhost:8000/recommendations/generate" \\')
    print('     -H "Authorization: Bearer <token>" \\')
    print('     -H "Content-Type: application/json" \\')
    print('     -d \'{"userId": "<your user id>", "jobType": "internship"}\'')
    print()
    print("Without OPENROUTER_API_KEY every request returns the rule-based set.")
    print("=" * 60)
    print()

    uvicorn.run(
        "career_backend.main:app",
        host="0.0.0.0",
        port=8000,
        reload=True,
        log_level="info"
    )
