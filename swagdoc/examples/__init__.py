"""Sample Flask services whose handlers are documented with Swagger annotations."""